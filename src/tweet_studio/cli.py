"""CLI commands using Typer."""

import json
import logging
import random
from pathlib import Path
from typing import Annotated

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from tweet_studio import __version__
from tweet_studio.api import create_app
from tweet_studio.config import Settings, load_config
from tweet_studio.exceptions import ConfigError, GenerationError, ValidationError
from tweet_studio.generation import GeneratedTweet, TweetGenerator
from tweet_studio.models import (
    GenerateTweetsRequest,
    LengthMode,
    PreferenceOverrides,
    Tone,
    parse_generate_request,
)
from tweet_studio.service import GenerationService
from tweet_studio.storage import MemoryStorage

app = typer.Typer(
    name="tweet-studio",
    help="Generate tweet variants from a topic and a few style toggles.",
    no_args_is_help=True,
)
console = Console()

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_VALIDATION_ERROR = 3


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_config(config_path: Path | None = None) -> Settings:
    """Load configuration with error handling."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR) from None


def make_rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def style_badges(tweet: GeneratedTweet) -> str:
    """Short labels describing the style a tweet was generated with."""
    style = tweet.style
    badges = [
        "Professional" if style.tone == Tone.PROFESSIONAL else "Autonomous",
        "With emojis" if style.include_emojis else "No emojis",
        "Concise" if style.length == LengthMode.CONCISE else "Expanded",
    ]
    return ", ".join(badges)


def render_tweets(tweets: list[GeneratedTweet]) -> Table:
    table = Table(title="Generated Tweets")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Tweet")
    table.add_column("Chars", justify="right")
    table.add_column("Style", style="dim")

    for i, tweet in enumerate(tweets, 1):
        color = "green" if tweet.character_count <= 280 else "red"
        table.add_row(
            f"Option {i}",
            tweet.content,
            f"[{color}]{tweet.character_count}[/{color}]",
            style_badges(tweet),
        )
    return table


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tweet-studio version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG).",
    ),
) -> None:
    """Tweet Studio - rule-based tweet variant generator."""
    setup_logging(verbose)


@app.command()
def generate(
    text: Annotated[str, typer.Argument(help="Topic or message to turn into tweets")],
    tone: Annotated[Tone | None, typer.Option("--tone", help="Writing tone")] = None,
    emojis: Annotated[
        bool | None, typer.Option("--emojis/--no-emojis", help="Prefix an emoji")
    ] = None,
    length: Annotated[LengthMode | None, typer.Option("--length", help="Length mode")] = None,
    hashtags: Annotated[
        bool | None, typer.Option("--hashtags/--no-hashtags", help="Append hashtags")
    ] = None,
    cta: Annotated[
        bool | None, typer.Option("--cta/--no-cta", help="Append a call-to-action")
    ] = None,
    questions: Annotated[
        bool | None,
        typer.Option("--questions/--no-questions", help="Frame the engaging variant as a question"),
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for the call-to-action pick")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="Config file")] = None,
) -> None:
    """Generate three tweet variants without starting the server.

    Style options left out on the command line fall back to the configured
    generation defaults.
    """
    settings = get_config(config_path)

    overrides = PreferenceOverrides(
        tone=tone,
        include_emojis=emojis,
        length=length,
        include_hashtags=hashtags,
        add_call_to_action=cta,
        include_questions=questions,
    )
    preferences = overrides.apply(settings.generation.preferences)


    try:
        request: GenerateTweetsRequest = parse_generate_request(
            {"input": text, "preferences": preferences.to_dict()}
        )
    except ValidationError as e:
        console.print(f"[red]Invalid input:[/red] {e}")
        raise typer.Exit(EXIT_VALIDATION_ERROR) from None

    rng = make_rng(seed if seed is not None else settings.generation.seed)
    try:
        tweets = TweetGenerator(rng).generate(request.input, request.preferences)
    except GenerationError as e:
        console.print(f"[red]Generation error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR) from None

    if as_json:
        typer.echo(json.dumps([t.to_dict() for t in tweets], indent=2, ensure_ascii=False))
        return

    console.print(render_tweets(tweets))


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Bind port")] = None,
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="Config file")] = None,
) -> None:
    """Run the HTTP API."""
    settings = get_config(config_path)
    host = host or settings.server.host
    port = port or settings.server.port

    rng = make_rng(settings.generation.seed)
    service = GenerationService(MemoryStorage(), TweetGenerator(rng))

    console.print(f"[blue]Serving on[/blue] http://{host}:{port}")
    uvicorn.run(create_app(service), host=host, port=port, log_level=settings.server.log_level)


@app.command()
def config(
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="Config file")] = None,
) -> None:
    """Show the effective configuration."""
    settings = get_config(config_path)
    defaults = settings.generation.preferences

    config_table = Table(title="Configuration")
    config_table.add_column("Setting", style="cyan")
    config_table.add_column("Value")

    config_table.add_row("Server", f"{settings.server.host}:{settings.server.port}")
    config_table.add_row("Tone", defaults.tone.value)
    config_table.add_row("Length", defaults.length.value)
    config_table.add_row("Emojis", "Yes" if defaults.include_emojis else "No")
    config_table.add_row("Hashtags", "Yes" if defaults.include_hashtags else "No")
    config_table.add_row("Call-to-action", "Yes" if defaults.add_call_to_action else "No")
    config_table.add_row("Questions", "Yes" if defaults.include_questions else "No")
    seed = settings.generation.seed
    config_table.add_row("Seed", str(seed) if seed is not None else "None")

    console.print(config_table)


if __name__ == "__main__":
    app()
