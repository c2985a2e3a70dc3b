"""Autotest Console - control panel for automated UI-test runs"""
