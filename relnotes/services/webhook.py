"""Webhook delivery.

- WebhookClient: protocol (injectable for tests)
- RealWebhookClient: JSON POST using urllib
- MockWebhookClient: records payloads, returns canned responses
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from relnotes import __version__
from relnotes.core.result import Err, Ok, Result

__all__ = [
    "MockWebhookClient",
    "RealWebhookClient",
    "WebhookClient",
    "WebhookError",
]


@dataclass(frozen=True, slots=True)
class WebhookError:
    """Delivery failure.

    Attributes:
        url: The webhook URL
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message}"
        return self.message


@runtime_checkable
class WebhookClient(Protocol):
    def post_json(self, url: str, payload: dict[str, object]) -> Result[int, WebhookError]:
        """POST ``payload`` as JSON and return the response status."""
        ...


class RealWebhookClient:
    def __init__(self, timeout: float = 30.0, user_agent: str = f"relnotes/{__version__}") -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def post_json(self, url: str, payload: dict[str, object]) -> Result[int, WebhookError]:
        body = json.dumps(payload).encode("utf-8")
        try:
            req = urllib.request.Request(
                url,
                data=body,
                method="POST",
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": self.user_agent,
                },
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(int(response.status))
        except urllib.error.HTTPError as e:
            return Err(WebhookError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(WebhookError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(WebhookError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(WebhookError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(WebhookError(url=url, status=0, message=str(e)))


class MockWebhookClient:
    """Records posted payloads.

    Usage:
        client = MockWebhookClient()
        client.set_error(WebhookError(url=url, status=500, message="boom"))
    """

    def __init__(self) -> None:
        self._error: WebhookError | None = None
        self.posted: list[tuple[str, dict[str, object]]] = []

    def set_error(self, error: WebhookError | None) -> None:
        self._error = error

    def post_json(self, url: str, payload: dict[str, object]) -> Result[int, WebhookError]:
        self.posted.append((url, payload))
        if self._error is not None:
            return Err(self._error)
        return Ok(200)
