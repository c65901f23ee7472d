#!/usr/bin/env python3
"""Command-line interface for the OpenAPI model generator."""

import argparse
import contextlib
import logging
import shutil
import sys
import tempfile
import traceback
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path

from oas_model_generator.generator.template_engine import ModelReportGenerator
from oas_model_generator.model.registry import build_registry
from oas_model_generator.parser.document import DocumentError
from oas_model_generator.parser.loader import load_document
from oas_model_generator.utils.file_utils import ensure_directory, write_files_to_disk

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_INVALID_DOCUMENT = 2
EXIT_GENERATION_ERROR = 3


@dataclass(frozen=True)
class GeneratorConfig:
    """Options of one generator run."""

    spec_file: Path
    output_dir: Path
    package_name: str = "models"
    verbose: bool = False


def parse_command_line_args(args: list[str] | None = None) -> GeneratorConfig:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Compile OpenAPI component schemas into a language-agnostic declaration model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --in openapi.yaml --out ./model
  %(prog)s --in openapi.json --out ./model --package petstore
  %(prog)s --in openapi.yaml --out ./model --verbose
        """,
    )
    parser.add_argument(
        "--in",
        type=Path,
        required=True,
        help="Path to OpenAPI spec (YAML/JSON)",
        metavar="SPEC_FILE",
        dest="spec_file",
    )
    parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Output directory for generated model files",
        dest="output_dir",
    )
    parser.add_argument(
        "--package",
        default="models",
        help="Base name for the generated files (default: %(default)s)",
        dest="package_name",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parsed_args = parser.parse_args(args)

    return GeneratorConfig(
        spec_file=parsed_args.spec_file,
        output_dir=parsed_args.output_dir,
        package_name=parsed_args.package_name,
        verbose=parsed_args.verbose,
    )


def print_generation_summary(*, declaration_count: int, files: dict[Path, str], output_dir: Path) -> None:
    """Print summary of generated files."""
    print(f"Collected {declaration_count} declarations")
    print(f"Generated {len(files)} files:")
    for file_path in sorted(files.keys()):
        print(f"  {file_path}")
    print(f"\nModel generated successfully in {output_dir}")


@contextlib.contextmanager
def backup_and_clean_output_dir(output_dir: Path) -> Generator[None, None, None]:
    """A context manager to backup and clean the output directory."""
    backup_dir = None
    if output_dir.exists() and any(output_dir.iterdir()):
        backup_dir = Path(tempfile.mkdtemp())
        shutil.copytree(output_dir, backup_dir, dirs_exist_ok=True)

    # Clean output directory before generation
    if output_dir.exists():
        shutil.rmtree(output_dir)
    ensure_directory(output_dir)

    try:
        yield
    except Exception:
        if backup_dir:
            print(
                "Error: Generation failed. Restoring original content.",
                file=sys.stderr,
            )
            if output_dir.exists():
                shutil.rmtree(output_dir)
            shutil.copytree(backup_dir, output_dir, dirs_exist_ok=True)
        raise
    finally:
        if backup_dir:
            shutil.rmtree(backup_dir)


def generate_model_from_spec(config: GeneratorConfig) -> tuple[int, dict[Path, str]]:
    """Compile the spec file and render the model files.

    Returns:
        The number of declarations and the files to write.
    """
    document = load_document(config.spec_file)
    registry = build_registry(document)

    generator = ModelReportGenerator()
    files = generator.generate(
        registry,
        config.output_dir,
        config.package_name,
        title=document.title,
    )
    return len(registry), files


def main(args: list[str] | None = None) -> int:
    """Generate the declaration model from an OpenAPI specification."""
    config = parse_command_line_args(args)

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not config.spec_file.exists():
        print(f"Error: Specification file not found: {config.spec_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND

    try:
        with backup_and_clean_output_dir(config.output_dir):
            declaration_count, generated_files = generate_model_from_spec(config)
            write_files_to_disk(generated_files)

            if config.verbose:
                print_generation_summary(
                    declaration_count=declaration_count,
                    files=generated_files,
                    output_dir=config.output_dir,
                )
            else:
                print(f"Model generated successfully in {config.output_dir}")

        return EXIT_SUCCESS

    except FileNotFoundError:
        print(f"Error: Specification file not found: {config.spec_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND
    except DocumentError as e:
        print(f"Error: Invalid specification file: {e}", file=sys.stderr)
        return EXIT_INVALID_DOCUMENT
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if config.verbose:
            traceback.print_exc()
        return EXIT_GENERATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
