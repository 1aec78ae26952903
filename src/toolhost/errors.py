"""Error hierarchy for toolhost.

Failures fall into two categories that never mix:

* :class:`ProtocolFault`: the envelope itself was unusable (bad bytes,
  unsupported method). These become JSON-RPC Error Objects.
* :class:`ApplicationFault`: the envelope was fine but the tool layer
  rejected the call. These ride in-band inside a successful ``result``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from toolhost.protocol.models import JsonRpcError

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601


class ToolhostError(Exception):
    """Base error for all toolhost failures."""


# ---------------------------------------------------------------------------
# Protocol faults, reported as JSON-RPC Error Objects
# ---------------------------------------------------------------------------


class ProtocolFault(ToolhostError):
    """A request that cannot be served at the envelope level."""

    code: int = 0
    default_message: str = ""

    def __init__(self, detail: str = "", data: Any = None) -> None:
        self.detail = detail
        self.data = data
        super().__init__(self.default_message + (f": {detail}" if detail else ""))

    def to_error(self) -> JsonRpcError:
        """Convert to the wire-level error object."""
        from toolhost.protocol.models import JsonRpcError

        return JsonRpcError(code=self.code, message=self.default_message, data=self.data)


class ParseError(ProtocolFault):
    """The request body is not a well-formed JSON-RPC envelope."""

    code = PARSE_ERROR
    default_message = "Parse error"


class MethodNotFoundError(ProtocolFault):
    """The requested method is not one the server implements."""

    code = METHOD_NOT_FOUND
    default_message = "Method not found"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(repr(method), data={"method": method})


# ---------------------------------------------------------------------------
# Application faults, reported in-band inside a successful result
# ---------------------------------------------------------------------------


class ApplicationFault(ToolhostError):
    """A well-formed call that the tool layer could not satisfy."""

    in_band_message: str = ""


class ToolNotFoundError(ApplicationFault):
    """Requested tool does not exist in the registry."""

    in_band_message = "Unknown tool"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name!r}")


class ToolExecutionError(ApplicationFault):
    """A tool body raised while handling a call."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        self.in_band_message = f"Tool execution failed: {name}" + (f" - {detail}" if detail else "")
        super().__init__(self.in_band_message)


# ---------------------------------------------------------------------------
# Startup misuse
# ---------------------------------------------------------------------------


class RegistryFrozenError(ToolhostError):
    """A tool was registered after the server started serving."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot register tool {name!r}: registry is frozen")


class ConfigError(ToolhostError):
    """Server configuration could not be loaded."""
