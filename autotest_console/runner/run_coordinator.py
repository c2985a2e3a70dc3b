"""
Run Coordinator - Single-flight run submission with a progress transcript
"""
import asyncio
import json
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..client import ApiClient
from ..models import BaseResponse, BatchRunResult, RunRequest, SingleRunResult, resolve_run_result

logger = logging.getLogger(__name__)


class RunCoordinator:
    """
    Owns the state of the one run an operator may have in flight:
    - the submitting flag shown by the run page
    - the transcript of timestamped progress lines
    - a private guard that turns overlapping submissions into no-ops

    Failures never escape; they end up in the transcript.
    """
    
    def __init__(self, client: ApiClient, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the coordinator.
        
        Args:
            client: API client used to submit runs
            clock: Source of transcript timestamps, defaults to datetime.now
        """
        self.client = client
        self._clock = clock or datetime.now
        self._submitting = False
        self._transcript: List[str] = []
        self._running = False
        self._task: Optional[asyncio.Task] = None
        
    @property
    def submitting(self) -> bool:
        return self._submitting
    
    @property
    def transcript(self) -> List[str]:
        return list(self._transcript)
    
    def snapshot(self) -> Dict[str, Any]:
        """State as consumed by views."""
        return {"submitting": self._submitting, "transcript": self.transcript}
        
    def start_run(self, request: RunRequest) -> Optional[asyncio.Task]:
        """
        Accept a run and dispatch it in the background.
        
        Must be called from inside the running event loop. While another run
        is in flight the call does nothing.
        
        Args:
            request: Validated run request
            
        Returns:
            The task executing the run, or None when the call was ignored
        """
        if self._running:
            logger.info("Run already in flight; ignoring new submission")
            return None
        
        loop = asyncio.get_running_loop()
        self._running = True
        self._transcript = []
        self._push("Uploading files and executing command… Please wait.")
        self._submitting = True
        
        logger.info(f"Run accepted for profile {request.profile_id}, sheet {request.sheet_name}")
        self._task = loop.create_task(self._execute(request))
        return self._task
    
    def clear_transcript(self):
        """Empty the transcript; a run in flight keeps going."""
        self._transcript = []
        
    async def _execute(self, request: RunRequest):
        try:
            envelope = await self.client.submit_run(request)
            self._record_response(envelope)
        except Exception as e:
            logger.warning(f"Run submission failed: {e}")
            message = str(e) or "Unknown error"
            self._push(f"❌ {message}")
        finally:
            self._submitting = False
            self._running = False
            
    def _record_response(self, envelope: BaseResponse):
        # A payload alone counts as success even when status says otherwise
        if envelope.is_success or envelope.has_payload:
            self._push("✅ Session created successfully!")
            result = resolve_run_result(envelope.data)
            if isinstance(result, BatchRunResult) and result.session_ids:
                self._push(f"Session IDs: {', '.join(result.session_ids)}")
            elif isinstance(result, SingleRunResult):
                self._push(f"Session ID: {result.id}")
            dump = envelope.data if envelope.has_payload else envelope.to_json_dict()
            self._push(_pretty(dump))
            logger.info(f"Run completed with status {envelope.status}")
        else:
            self._push(f"⚠️ {envelope.message if envelope.message is not None else 'Unexpected response'}")
            self._push(_pretty(envelope.to_json_dict()))
            logger.warning(f"Run rejected: {envelope.message}")
            
    def _push(self, message: str):
        self._transcript.append(f"[{self._clock().strftime('%H:%M:%S')}] {message}")


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
