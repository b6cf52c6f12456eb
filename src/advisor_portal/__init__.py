"""Advisor Portal - admin server for the MyAdvisor WhatsApp question flow."""

__version__ = "0.1.0"
