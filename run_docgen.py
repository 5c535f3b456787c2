#!/usr/bin/env python3
"""
Top-level orchestrator for TypeScript declaration documentation.

Extracts the methods of one class or interface from a declaration file and
asks an AI model to write a markdown section for each of them.

Usage:
    python run_docgen.py --file types/player.d.ts --class Player
    python run_docgen.py -f types/player.d.ts -c Player -m claude -e AddItem,AddQuest
    python run_docgen.py -f types/player.d.ts -c Player --extract-only --dump-json out/player.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.run_artifacts import write_extraction_dump, write_run_report
from core.run_config import (
    ConfigValidationError,
    load_run_config,
    resolve_strict_config_validation,
)
from core.structured_logging import configure_structured_logging, phase_scope, set_run_id
from extraction.extractor import extract, parse_name_list
from extraction.models import ExtractedMethod, ExtractionRequest
from extraction.parser import ParseError
from rendering.completion import CompletionError, create_backend
from rendering.config import MODEL_ALIASES
from rendering.markdown_writer import MarkdownWriter
from rendering.prompt import load_few_shot_example
from rendering.renderer import DocumentationRenderer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="TypeScript declaration method extraction & AI documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_docgen.py -f types/player.d.ts -c Player\n"
            "  python run_docgen.py -f types/player.d.ts -c Player -m gpt4 -i AddItem,AddQuest\n"
        ),
    )

    parser.add_argument(
        "-f", "--file",
        required=True,
        help="The declaration file to parse for class methods.",
    )
    parser.add_argument(
        "-c", "--class",
        dest="class_name",
        required=True,
        help="Which class or interface to process from the file.",
    )
    parser.add_argument(
        "-i", "--include",
        default=None,
        help="Comma-separated method names to document (default: all).",
    )
    parser.add_argument(
        "-e", "--exclude",
        default=None,
        help="Comma-separated method names to skip. Wins over --include.",
    )
    parser.add_argument(
        "-m", "--model",
        choices=MODEL_ALIASES,
        default=None,
        help="The AI model to use. Default: from --config, else gpt3.",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=None,
        help="Directory for the per-class markdown files.",
    )
    parser.add_argument(
        "--examples-file",
        default=None,
        help="Few-shot example documentation prepended to every prompt.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with defaults for model, output_dir and examples_file.",
    )
    parser.add_argument(
        "--strict-config",
        action="store_true",
        default=resolve_strict_config_validation(),
        help="Fail on invalid configuration instead of using defaults.",
    )
    parser.add_argument(
        "--dump-json",
        default=None,
        help="Also write the extracted methods to this JSON file.",
    )
    parser.add_argument(
        "--report-dir",
        default=None,
        help="Write a JSON run report into this directory.",
    )
    parser.add_argument(
        "--extract-only",
        action="store_true",
        default=False,
        help="Stop after extraction; do not call the AI model.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)


def phase_extract(args: argparse.Namespace, run_id: str) -> List[ExtractedMethod]:
    """Extract the requested methods and optionally dump them to JSON."""
    request = ExtractionRequest(
        file_path=args.file,
        declaration_name=args.class_name,
        include_names=parse_name_list(args.include),
        exclude_names=parse_name_list(args.exclude),
    )
    methods = extract(request)

    for method in methods:
        logger.info(
            "  %s.%s (line %d): %s",
            method.declaration_name,
            method.method_name,
            method.start_line,
            method.signature_text,
        )

    if args.dump_json:
        path = write_extraction_dump(
            [method.to_dict() for method in methods],
            args.dump_json,
            run_id=run_id,
            source_file=args.file,
            declaration_name=args.class_name,
        )
        logger.info("Wrote %d methods to %s", len(methods), path)

    return methods


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for documentation generation."""
    args = parse_args(argv)
    configure_structured_logging(logging.DEBUG if args.verbose else logging.INFO)
    run_id = set_run_id()
    report = {"source_file": args.file, "declaration_name": args.class_name}

    try:
        config = load_run_config(args.config, MODEL_ALIASES, strict=args.strict_config)
        model = args.model or config.model
        output_dir = args.output_dir or config.output_dir
        examples_file = args.examples_file or config.examples_file

        with phase_scope("extract"):
            methods = phase_extract(args, run_id)
        report["methods_extracted"] = len(methods)

        if not methods:
            logger.warning("No methods extracted for '%s'. Nothing to render.", args.class_name)
        elif args.extract_only:
            logger.info("--extract-only set; skipping documentation phase.")
        else:
            with phase_scope("render"):
                renderer = DocumentationRenderer(
                    backend=create_backend(model),
                    writer=MarkdownWriter(output_dir),
                    few_shot_example=load_few_shot_example(examples_file),
                )
                stats = renderer.render(methods)
            report["render"] = stats.to_dict()

        report["status"] = "success"
        exit_code = EXIT_OK

    except ConfigValidationError as e:
        logger.error("Configuration error: %s", e)
        report.update(status="failed", error=str(e))
        exit_code = EXIT_CONFIG
    except ParseError as e:
        logger.error("Parse error: %s", e)
        report.update(status="failed", error=str(e))
        exit_code = EXIT_FAILURE
    except OSError as e:
        logger.error("File error: %s", e)
        report.update(status="failed", error=str(e))
        exit_code = EXIT_FAILURE
    except (CompletionError, ValueError) as e:
        logger.error("Documentation failed: %s", e)
        report.update(status="failed", error=str(e))
        exit_code = EXIT_FAILURE
    except Exception as e:
        logger.error("Run failed: %s", e, exc_info=True)
        report.update(status="failed", error=str(e))
        exit_code = EXIT_FAILURE

    if args.report_dir:
        path = write_run_report(report, run_id, output_dir=args.report_dir)
        logger.info("Run report written to %s", path)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
