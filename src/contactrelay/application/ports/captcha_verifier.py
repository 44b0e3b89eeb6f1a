from __future__ import annotations
from typing import Optional, Protocol


class CaptchaVerifier(Protocol):
    # True when the token is genuine; raises CaptchaVerificationError when the verifier is unusable
    async def verify(self, token: str, remote_ip: Optional[str] = None) -> bool: ...
