import argparse
import json
import logging
import sys

from ..config.settings import settings
from ..container import configure_container, container
from ..core.exceptions import TemplateSyntaxError
from ..core.models.template import MatchMode
from ..core.services.parser_service import TextParser
from ..core.services.template_repository import TemplateRepository
from ..infrastructure.document_loaders import CompositeLoader

logger = logging.getLogger(__name__)

EXIT_NO_MATCH = 1
EXIT_BAD_TEMPLATE = 2


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse command - extract values from an input document."""
    text = container.resolve(CompositeLoader).load(args.input)
    parser = container.resolve(TextParser)
    mode = MatchMode(args.mode) if args.mode else None

    try:
        if args.template:
            result = parser.parse_by_template(text, args.template, mode=mode)
        else:
            result = parser.parse_by_templates_dir(
                text,
                args.templates_dir or settings.templates_path,
                find_matching_template=(
                    settings.find_matching_template and not args.all
                ),
                mode=mode,
            )
    except TemplateSyntaxError as e:
        logger.error(str(e))
        return EXIT_BAD_TEMPLATE

    if result is None:
        logger.error("No template matched")
        return EXIT_NO_MATCH

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def cmd_rank(args: argparse.Namespace) -> int:
    """Rank command - show template similarity scores."""
    text = container.resolve(CompositeLoader).load(args.input)
    repository = container.resolve(TemplateRepository)

    for match in repository.rank(args.templates_dir or settings.templates_path, text):
        print(f"{match.score:6.2f}  {match.source}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textparser",
        description="Extract structured data from text using {%Name%} templates.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="extract values from a document")
    parse_cmd.add_argument("input", help="input document (.txt, .pdf, .docx, ...)")
    source = parse_cmd.add_mutually_exclusive_group()
    source.add_argument("--template", help="template file to use")
    source.add_argument("--templates-dir", help="directory of candidate templates")
    parse_cmd.add_argument(
        "--all",
        action="store_true",
        help="try every template in order instead of only the most similar one",
    )
    parse_cmd.add_argument(
        "--mode", choices=[m.value for m in MatchMode], help="matching mode"
    )
    parse_cmd.set_defaults(handler=cmd_parse)

    rank_cmd = commands.add_parser("rank", help="rank templates by similarity")
    rank_cmd.add_argument("input", help="input document")
    rank_cmd.add_argument("--templates-dir", help="directory of candidate templates")
    rank_cmd.set_defaults(handler=cmd_rank)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    configure_container(settings)

    sys.exit(args.handler(args))


if __name__ == "__main__":
    main()
