"""
Presentation service (Alai): authentication, REST client and the slide
assembly protocol.
"""

from presenter.alai.auth import AlaiAuthenticator
from presenter.alai.client import AlaiClient
from presenter.alai.assembler import (
    PresentationAssembler,
    RemoteSession,
    RemoteSlide,
    SessionState,
)

__all__ = [
    "AlaiAuthenticator",
    "AlaiClient",
    "PresentationAssembler",
    "RemoteSession",
    "RemoteSlide",
    "SessionState",
]
