"""Enumeration types for the session protocol."""

from enum import Enum


class SessionState(str, Enum):
    AWAITING_CUSTOMER = "AWAITING_CUSTOMER"
    AUTHENTICATED = "AUTHENTICATED"
    HALTED = "HALTED"
