"""
CLI commands for telegram-mcp.

Uses Typer for command-line interface. stdout belongs to the MCP stream
while serving, so diagnostics and logs go to stderr.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from telegram_mcp.channels.telegram import TelegramSender
from telegram_mcp.config import Settings, load_config
from telegram_mcp.errors import ConfigurationError, TelegramMcpError
from telegram_mcp.gateway import serve_stdio


app = typer.Typer(
    name="telegram-mcp",
    help="MCP server for sending messages to a Telegram chat",
)

ENV_FILE_OPTION = typer.Option(
    None, "--env-file", help="dotenv file to read (defaults to ./.env)"
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    # httpx logs full request URLs, which embed the bot token
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _load_or_exit(env_file: Optional[Path]) -> Settings:
    """Load settings, or print the problem and exit 1."""
    try:
        return load_config(env_file)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def serve(
    env_file: Optional[Path] = ENV_FILE_OPTION,
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
):
    """
    Run the MCP server over stdio.

    Exits with status 1 before serving if TELEGRAM_BOT_TOKEN or
    TELEGRAM_CHAT_ID is missing.
    """
    config = _load_or_exit(env_file)
    _configure_logging(log_level)

    try:
        asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        logging.getLogger("telegram_mcp").info("Interrupted, shutting down")


@app.command()
def send(
    message: str = typer.Argument(..., help="Text of the message"),
    parse_mode: Optional[str] = typer.Option(
        None, "--parse-mode", help="HTML, Markdown or MarkdownV2"
    ),
    env_file: Optional[Path] = ENV_FILE_OPTION,
):
    """Send a single message without starting the server."""
    config = _load_or_exit(env_file)
    sender = TelegramSender(config)

    arguments = {"message": message}
    if parse_mode:
        arguments["parse_mode"] = parse_mode

    try:
        request = sender.validate(arguments)
        result = asyncio.run(sender.send(request.message, request.parse_mode))
    except TelegramMcpError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(result)


@app.command()
def status(env_file: Optional[Path] = ENV_FILE_OPTION):
    """Show configuration."""
    config = _load_or_exit(env_file)

    typer.echo("\n=== Telegram MCP Status ===")
    typer.echo(f"Bot token: {config.redacted_token}")
    typer.echo(f"Chat ID: {config.chat_id}")
    typer.echo(f"API base: {config.api_base}")
    typer.echo("")


def main() -> None:
    """Entry point for CLI."""
    app()
