"""Diagnostic Handlers: echo (no backend call)."""


class DiagnosticHandlers:
    """Connectivity check tools; no backend client."""

    async def echo(self, args: dict) -> str:
        return args["message"]
