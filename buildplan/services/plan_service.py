"""Service resolving the build plan for a filtered VMM test run."""

import json
from dataclasses import dataclass
from pathlib import Path

from buildplan.core.structlog_logger import StructlogMixin
from buildplan.invocation.cargo_test import CargoTestInvocation, manifest_invocation
from buildplan.invocation.nextest_list import NextestListInvocation
from buildplan.models.invocation import CargoFlags
from buildplan.models.platform import BackendKind, HostPlatform
from buildplan.parsers.filter_match import parse_filter_matches
from buildplan.parsers.manifest import parse_requirement_manifest
from buildplan.protocols.process_adapter_protocol import ProcessAdapterProtocol
from buildplan.resolution.resolver import ResolutionResult, resolve_build_selections


@dataclass(frozen=True)
class PlanRequest:
    """Everything needed to resolve the build plan of one filtered test run.

    Attributes:
        target: Target triple the tests are built for
        nextest_profile: Nextest profile used for listing
        filter_expr: Nextest filter expression selecting the tests
        archive_file: Nextest archive to list from (lists from the workspace if None)
        nextest_bin: Standalone cargo-nextest binary (uses ``cargo nextest`` if None)
        config_file: Nextest config file
        workspace_remap: Workspace root for archive listings
        release: Whether the test binary is built in release mode
        run_ignored: Include ignored tests in the listing
    """

    target: str
    nextest_profile: str
    filter_expr: str
    archive_file: Path | None = None
    nextest_bin: Path | None = None
    config_file: Path | None = None
    workspace_remap: Path | None = None
    release: bool = False
    run_ignored: bool = False


class BuildPlanService(StructlogMixin):
    """Runs the listing and manifest invocations and resolves the plan."""

    def __init__(
        self,
        process_adapter: ProcessAdapterProtocol,
        backend: BackendKind = BackendKind.LOCAL,
        cargo_flags: CargoFlags | None = None,
        rust_toolchain: str | None = None,
    ) -> None:
        self.process_adapter = process_adapter
        self.backend = backend
        self.cargo_flags = cargo_flags or CargoFlags()
        self.rust_toolchain = rust_toolchain

    def listing_invocation(self, request: PlanRequest) -> NextestListInvocation:
        return NextestListInvocation(
            nextest_profile=request.nextest_profile,
            filter_expr=request.filter_expr,
            archive_file=request.archive_file,
            workspace_remap=request.workspace_remap,
            nextest_bin=request.nextest_bin,
            target=request.target,
            config_file=request.config_file,
            run_ignored=request.run_ignored,
            flags=self.cargo_flags,
            rust_toolchain=self.rust_toolchain,
        )

    def manifest_invocation(self, request: PlanRequest) -> CargoTestInvocation:
        return manifest_invocation(
            target=request.target,
            release=request.release,
            flags=self.cargo_flags,
            rust_toolchain=self.rust_toolchain,
        )

    def resolve_from_outputs(
        self,
        listing_output: str,
        manifest_output: str,
        host: HostPlatform,
        filter_expr: str | None = None,
    ) -> ResolutionResult:
        """Resolve from already captured listing and manifest outputs.

        Raises:
            ParseError: If either output is malformed
            SchemaError: If the listing lacks the expected structure
        """
        matched_names = parse_filter_matches(listing_output).matched_names()
        self.logger.info(
            "filter_matched_tests", matched=len(matched_names), filter=filter_expr
        )
        records = parse_requirement_manifest(manifest_output)
        return resolve_build_selections(matched_names, records, host)

    def plan(self, request: PlanRequest, host: HostPlatform) -> ResolutionResult:
        """Run both invocations and resolve the build plan.

        The two invocations are independent; both must succeed before
        resolution starts.

        Raises:
            ProcessError: If either invocation fails
            ParseError: If either output is malformed
            SchemaError: If the listing lacks the expected structure
        """
        log = self.log_operation("plan", target=request.target)
        log.info("listing_filtered_tests", filter=request.filter_expr)
        listing = self.process_adapter.run(
            self.listing_invocation(request).to_command(self.backend)
        )

        log.info("extracting_artifact_manifest")
        manifest = self.process_adapter.run(
            self.manifest_invocation(request).to_command(self.backend)
        )

        return self.resolve_from_outputs(
            listing.stdout, manifest.stdout, host, filter_expr=request.filter_expr
        )


def write_selections(result: ResolutionResult, path: Path) -> None:
    """Write the build selections as JSON for the build scheduler."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(result.selections.to_dict(), indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


def create_build_plan_service(
    process_adapter: ProcessAdapterProtocol | None = None,
    backend: BackendKind = BackendKind.LOCAL,
    cargo_flags: CargoFlags | None = None,
    rust_toolchain: str | None = None,
) -> BuildPlanService:
    """Factory function to create a BuildPlanService."""
    if process_adapter is None:
        from buildplan.adapters.process_adapter import create_process_adapter

        process_adapter = create_process_adapter()
    return BuildPlanService(
        process_adapter,
        backend=backend,
        cargo_flags=cargo_flags,
        rust_toolchain=rust_toolchain,
    )
