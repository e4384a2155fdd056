"""CLI entrypoints for dockgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import ArtifactWriteError, NoLanguageDetected
from .languages import DEFAULT_LANGUAGES_FILE, LanguageList
from .logging import configure_logging
from .models import GeneratedArtifact
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project directory (defaults to current directory).",
    )


def _add_languages_file_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        default=DEFAULT_LANGUAGES_FILE,
        help=f"Language list file (defaults to {DEFAULT_LANGUAGES_FILE}).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockgen",
        description="Detect project languages and generate a Dockerfile for them.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write a Dockerfile into the project directory.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the Dockerfile instead of writing it.",
    )

    detect_parser = subparsers.add_parser(
        "detect",
        help="List detected languages and their dependencies.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    _add_path_argument(detect_parser)

    languages_parser = subparsers.add_parser(
        "languages",
        help="Manage the list of known language names.",
    )
    _add_verbose_option(languages_parser, suppress_default=True)
    languages_sub = languages_parser.add_subparsers(dest="languages_command", required=True)
    list_parser = languages_sub.add_parser("list", help="Show known language names.")
    _add_languages_file_option(list_parser)
    add_parser = languages_sub.add_parser("add", help="Append a language name.")
    add_parser.add_argument("name", help="Display name of the language to add.")
    _add_languages_file_option(add_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the dockgen HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dockgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "generate":
        orchestrator = Orchestrator()
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            outcome = orchestrator.run(args.path, dry_run=dry_run)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except NoLanguageDetected as exc:
            parser.exit(1, f"{exc} (unsupported project)\n")
        except (ArtifactWriteError, OSError) as exc:
            parser.exit(1, f"dockgen generate failed: {exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"dockgen generate failed: {exc}\nRun with --verbose for more details.\n")
        _print_report(outcome.artifact)
        if dry_run:
            print()
            print(outcome.artifact.content, end="")
        else:
            print(f"Dockerfile created at {_relativize(outcome.path)}")
    elif args.command == "detect":
        orchestrator = Orchestrator()
        try:
            artifact = orchestrator.resolve(args.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except NoLanguageDetected as exc:
            parser.exit(1, f"{exc} (unsupported project)\n")
        except OSError as exc:
            parser.exit(1, f"dockgen detect failed: {exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"dockgen detect failed: {exc}\n")
        _print_report(artifact)
    elif args.command == "languages":
        language_list = LanguageList(args.file)
        language_list.ensure()
        if args.languages_command == "add":
            try:
                added = language_list.add(args.name)
            except ValueError as exc:
                parser.exit(1, f"{exc}\n")
            print(f"Added language: {added}")
        else:
            for name in language_list.names():
                print(name)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _print_report(artifact: GeneratedArtifact) -> None:
    if not artifact.multi_stage:
        stage = artifact.stages[0]
        print(f"Detected language: {stage.language}")
        if stage.dependencies:
            print(f"Detected libraries ({stage.language}):")
            for dependency in stage.dependencies:
                print(f"  - {dependency}")
        else:
            print(f"No libraries detected automatically ({stage.language}).")
        return

    print("Multiple languages detected; generating a stage for each.")
    for stage in artifact.stages:
        print(f"[{stage.language}] detected libraries:")
        if stage.dependencies:
            for dependency in stage.dependencies:
                print(f"  - {dependency}")
        else:
            print("  none")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
