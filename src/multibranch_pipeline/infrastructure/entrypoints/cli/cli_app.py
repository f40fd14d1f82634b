"""Command-line entrypoint for the multi-branch pipeline demo.

The CI engine calls these sub-commands with BRANCH_NAME and BUILD_NUMBER in
the environment; --branch/--build override them for local runs.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

import uvicorn

from multibranch_pipeline.application.core.services.branch_classifier_service import (
    BranchClassifierService,
)
from multibranch_pipeline.application.core.shared.deployment_tag_service import sanitize_tag
from multibranch_pipeline.application.usecases.pipeline.build_pipeline_plan_usecase import (
    BuildPipelinePlanUseCase,
)
from multibranch_pipeline.application.usecases.testing.run_simulated_tests_usecase import (
    RunSimulatedTestsUseCase,
)
from multibranch_pipeline.infrastructure.configuration.main_settings import Settings
from multibranch_pipeline.infrastructure.entrypoints.api.app_factory import create_app
from multibranch_pipeline.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multibranch-demo",
        description="Branch-aware pipeline helpers and demo server",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the demo HTTP server")
    serve.add_argument("--host", type=str, default=None, help="Host to bind to")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on")

    classify = sub.add_parser("classify", help="Print the branch classification as JSON")
    classify.add_argument("--branch", type=str, default=None)

    tag = sub.add_parser("tag", help="Print the sanitized deployment tag")
    tag.add_argument("--branch", type=str, default=None)
    tag.add_argument("--build", type=str, default=None)

    plan = sub.add_parser("plan", help="Print the pipeline stage plan as JSON")
    plan.add_argument("--branch", type=str, default=None)
    plan.add_argument("--build", type=str, default=None)

    test = sub.add_parser("test", help="Run the simulated test suite")
    test.add_argument("--branch", type=str, default=None)

    return parser


def _pick(override: str | None, fallback: str) -> str:
    return fallback if override is None else override


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    host = _pick(args.host, settings.host)
    port = settings.port if args.port is None else args.port
    # create_app() logs the branch banner; uvicorn reports the bound address once listening.
    app = create_app(settings)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower(), access_log=False)
    return 0


def _classify(args: argparse.Namespace, settings: Settings) -> int:
    branch = _pick(args.branch, settings.branch_name)
    classification = BranchClassifierService.classify(branch)
    if classification.warning:
        logger.warning(classification.warning)
    print(json.dumps({"branch": branch or "unknown", **classification.to_dict()}, indent=2))
    return 0


def _tag(args: argparse.Namespace, settings: Settings) -> int:
    print(sanitize_tag(_pick(args.branch, settings.branch_name), _pick(args.build, settings.build_number)))
    return 0


def _plan(args: argparse.Namespace, settings: Settings) -> int:
    plan = BuildPipelinePlanUseCase(logger).execute(
        _pick(args.branch, settings.branch_name),
        _pick(args.build, settings.build_number),
    )
    print(plan.model_dump_json(indent=2))
    return 0


def _test(args: argparse.Namespace, settings: Settings) -> int:
    for line in RunSimulatedTestsUseCase(logger).iter_lines(_pick(args.branch, settings.branch_name)):
        print(line)
    return 0


COMMANDS = {
    "serve": _serve,
    "classify": _classify,
    "tag": _tag,
    "plan": _plan,
    "test": _test,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    LoggerFactoryService.configure_root_logger(settings.log_level)
    return COMMANDS[args.command](args, settings)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
