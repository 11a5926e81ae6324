"""Environment overrides shared by cargo invocations."""

from buildplan.models.platform import BackendKind


CARGO_INCREMENTAL = "CARGO_INCREMENTAL"


def cargo_backend_env(backend: BackendKind) -> dict[str, str]:
    """Environment overrides for running cargo on ``backend``.

    CI backends build from scratch every time, so incremental compilation
    caches are disabled there. Local runs keep cargo's default.
    """
    if BackendKind(backend).is_local:
        return {}
    return {CARGO_INCREMENTAL: "0"}
