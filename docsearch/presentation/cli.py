import argparse
import logging
import sys
from typing import Optional, TextIO

from docsearch.config.settings import Settings
from docsearch.container import Container, configure_container
from docsearch.core.exceptions import DocSearchError
from docsearch.core.services.registry_service import KnowledgeRegistry
from docsearch.presentation.agent_tool import SearchDocsTool

logger = logging.getLogger(__name__)


def load_settings(args: argparse.Namespace) -> Settings:
    """Settings from env/.env with command line overrides."""
    overrides = {"tenant_id": args.tenant, "knowledge_dir": args.dir}
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def build_registry(settings: Settings) -> tuple[Container, KnowledgeRegistry]:
    container = configure_container(settings)
    registry = container.resolve(KnowledgeRegistry)
    registry.load(settings.tenant_id, settings.knowledge_dir)
    return container, registry


def cmd_index(settings: Settings, args: argparse.Namespace, out: TextIO) -> None:
    """Index command - build the tenant index and report it."""
    _, registry = build_registry(settings)
    index = registry.get(settings.tenant_id)

    for source in index.source_files:
        count = sum(1 for c in index.chunks if c.source_file == source)
        print(f"{source}: {count} chunks", file=out)
    print(f"Total: {len(index)} chunks", file=out)


def cmd_search(settings: Settings, args: argparse.Namespace, out: TextIO) -> None:
    """Search command - one query against a freshly built index."""
    container, registry = build_registry(settings)

    if args.json:
        tool = container.resolve(SearchDocsTool)
        print(tool.execute(args.query, args.top_k), file=out)
        return

    results = registry.search(settings.tenant_id, args.query, args.top_k)
    if not results:
        print("No matching passages.", file=out)
        return

    for i, r in enumerate(results, 1):
        print(f"[{i}] score={r.score} {r.title} ({r.source_file}) {r.chunk_id}", file=out)
        print(f"    {r.text}", file=out)


def cmd_repl(
    settings: Settings, args: argparse.Namespace, out: TextIO, stdin: TextIO = sys.stdin
) -> None:
    """Repl command - answer queries from stdin with the tool payload."""
    container, _ = build_registry(settings)
    tool = container.resolve(SearchDocsTool)

    for line in stdin:
        query = line.strip()
        if not query:
            break
        print(tool.execute(query), file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsearch", description="Search tenant knowledge documents."
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--tenant", help="Tenant id (default: settings)")
    common.add_argument("--dir", help="Knowledge folder (default: settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    index = sub.add_parser("index", parents=[common], help="Build the index and show stats")
    index.set_defaults(func=cmd_index)

    search = sub.add_parser("search", parents=[common], help="Run one query")
    search.add_argument("query")
    search.add_argument("--top-k", type=int, default=None)
    search.add_argument("--json", action="store_true", help="Print the agent tool payload")
    search.set_defaults(func=cmd_search)

    repl = sub.add_parser("repl", parents=[common], help="Answer queries read from stdin")
    repl.set_defaults(func=cmd_repl)

    return parser


def main(argv: Optional[list[str]] = None, out: TextIO = sys.stdout) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args)

    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    try:
        args.func(settings, args, out)
    except DocSearchError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
