"""
Core services for dashboard components
"""
from .shell import CommandError, run_command
from .polling import (
    PollFailure,
    PollingClient,
    PollPhase,
    PollState,
    PollSuccess,
    apply_result,
)

__all__ = [
    'CommandError',
    'run_command',
    'PollFailure',
    'PollingClient',
    'PollPhase',
    'PollState',
    'PollSuccess',
    'apply_result',
]
