#!/usr/bin/env python3
"""
Command line entry point.

Renders a section component from a YAML file, or lists the available
styles, and prints the result as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from ui_styles_layout_builder.constants import ErrorMessages
from ui_styles_layout_builder.models import SectionComponent

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_component(path: Path) -> SectionComponent:
    """Load a section component from a YAML file."""
    if not path.exists():
        raise FileNotFoundError(ErrorMessages.COMPONENT_NOT_FOUND.format(path=path))
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(ErrorMessages.INVALID_COMPONENT.format(path=path, error=e)) from e
    return SectionComponent.model_validate(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Layout builder block styles")
    parser.add_argument(
        "--styles-dir",
        type=Path,
        default=None,
        help="Project styles directory (default: ./styles)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a component to JSON")
    render.add_argument("component", type=Path, help="Component YAML file")
    render.add_argument(
        "--preview",
        action="store_true",
        help="Render as in the layout builder preview",
    )

    subparsers.add_parser("list-styles", help="List available styles")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so --debug covers module setup
    from ui_styles_layout_builder.app import (
        create_dispatcher,
        create_style_manager,
        render_component,
    )

    try:
        style_manager = create_style_manager(args.styles_dir)
        if args.command == "list-styles":
            result = {
                "status": "success",
                "styles": [style.model_dump() for style in style_manager.get_definitions()],
            }
        else:
            component = load_component(args.component)
            dispatcher = create_dispatcher(style_manager)
            build = render_component(component, dispatcher, in_preview=args.preview)
            result = {"status": "success", "build": build}
    except (ValueError, FileNotFoundError, ValidationError) as e:
        logger.exception("Command failed")
        print(json.dumps({"status": "error", "message": str(e)}))
        return 1

    # YAML content can carry dates and other non-JSON scalars
    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
