"""Protocol definitions for buildplan collaborators."""

from buildplan.protocols.process_adapter_protocol import (
    ProcessAdapterProtocol,
    ProcessOutput,
)


__all__ = ["ProcessAdapterProtocol", "ProcessOutput"]
