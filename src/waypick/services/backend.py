# services/backend.py
import logging

import httpx
from pydantic import BaseModel, ValidationError

from waypick.services.contracts import GraphRequest, GraphResponse, PathRequest, PathResponse

log = logging.getLogger("waypick.backend")

GRAPH_ENDPOINT = "/get_graph"
PATH_ENDPOINT = "/calculate_path"


class GatewayError(RuntimeError):
    """A backend call failed: transport error, non-2xx status or a body off-contract."""

    def __init__(self, endpoint: str, reason: str, status: int | None = None):
        super().__init__(f"{endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason
        self.status = status


class HttpBackendGateway:
    """
    JSON-over-HTTP client for the routing backend.
    One call per request; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=transport)

    def get_graph(self, req: GraphRequest) -> GraphResponse:
        return self._post(GRAPH_ENDPOINT, req, GraphResponse)

    def calculate_path(self, req: PathRequest) -> PathResponse:
        return self._post(PATH_ENDPOINT, req, PathResponse)

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpBackendGateway":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------

    def _post(self, endpoint: str, req: BaseModel, model: type[BaseModel]):
        try:
            resp = self._client.post(endpoint, json=req.model_dump())
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise GatewayError(endpoint, f"HTTP {status}", status=status) from exc
        except httpx.HTTPError as exc:
            raise GatewayError(endpoint, f"transport: {exc}") from exc

        try:
            out = model.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise GatewayError(
                endpoint, "malformed response body", status=resp.status_code
            ) from exc
        log.debug("backend %s ok (%d)", endpoint, resp.status_code)
        return out
