# cli.py

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit.shortcuts import confirm
from rich.console import Console

from .config import ColordinateConfig
from .display import render_document, render_error, render_preview
from .errors import ColordinateError
from .hosts import create_host
from .logger import Logger
from .model import parse
from .script import to_script
from .session import ColordinateSession, MemoryBuffer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='colordinate',
        description='Edit editor highlight groups as a YAML document')
    parser.add_argument('-e', '--endpoint',
        help='Editor bridge URL. Without it an empty embedded table is used')
    parser.add_argument('--enable-logging',
        action='store_true', default=None,
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--save-path',
        help='Directory colorschemes are saved to')
    parser.add_argument('--mode',
        help='Highlight render mode to query (default: gui)')

    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('load', help='Print the live highlight table as YAML')
    for name, help_text in (
        ('check', 'Validate a YAML document'),
        ('script', 'Print the highlight commands for a YAML document'),
        ('preview', 'Show each group in its own style'),
        ('apply', 'Apply a YAML document to the editor'),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument('file', type=Path)
    save = sub.add_parser('save', help='Write a YAML document as a colorscheme file')
    save.add_argument('name', help='Colorscheme name')
    save.add_argument('file', type=Path)
    save.add_argument('-y', '--yes', action='store_true',
        help='Overwrite an existing file without asking')
    return parser


async def _run(args, config: ColordinateConfig, console: Console, logger: Logger) -> int:
    if args.command == 'load':
        host = create_host(config.endpoint, logger=logger)
        session = ColordinateSession(host, config=config, logger=logger)
        try:
            await session.load()
        finally:
            if hasattr(host, 'aclose'):
                await host.aclose()
        console.print(render_document(session.buffer.get_text()))
        return 0

    text = args.file.read_text()

    if args.command == 'check':
        model = parse(text)
        console.print(f"[green]OK[/green] {len(model)} highlight groups")
    elif args.command == 'script':
        console.print(to_script(parse(text)), markup=False, highlight=False, soft_wrap=True)
    elif args.command == 'preview':
        console.print(render_preview(parse(text)))
    elif args.command == 'apply':
        host = create_host(config.endpoint, logger=logger)
        session = ColordinateSession(host, MemoryBuffer(config.buffer_name, text), config, logger)
        try:
            model = await session.reflect()
        finally:
            if hasattr(host, 'aclose'):
                await host.aclose()
        console.print(f"Applied {len(model)} highlight groups")
    elif args.command == 'save':
        session = ColordinateSession(
            create_host(None), MemoryBuffer(config.buffer_name, text), config, logger)
        path = session.save(args.name, confirm=None if args.yes else confirm)
        if path is None:
            console.print("Not saved")
        else:
            console.print(f"Saved {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = ColordinateConfig.from_env(
        endpoint=args.endpoint,
        save_path=args.save_path,
        mode=args.mode,
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
    )
    logger = Logger('colordinate', config.logging_enabled, config.log_file)
    console = Console()
    err_console = Console(stderr=True)

    try:
        return asyncio.run(_run(args, config, console, logger))
    except ColordinateError as e:
        err_console.print(render_error(e))
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        err_console.print(f"[red]{e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
