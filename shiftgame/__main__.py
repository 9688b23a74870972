#!/usr/bin/env python3
"""
Caesar Shift Game
A console game: guess the hidden shift used to encrypt a word.
"""
import sys
import logging
from pathlib import Path
from datetime import datetime

import click

from shiftgame.config import GameSettings, load_settings


def setup_logging(log_dir: Path, debug: bool = False) -> Path:
    """Configure logging to both console and file.

    Returns:
        Path to the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = log_dir / f"shiftgame_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - keep stdout/stderr clear for the game unless debugging
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


def _apply_overrides(
    settings: GameSettings,
    seed: int | None,
    reset_from_plaintext: bool,
) -> GameSettings:
    updates = {}
    if seed is not None:
        updates["seed"] = seed
    if reset_from_plaintext:
        updates["reset_from_plaintext"] = reset_from_plaintext
    return settings.model_copy(update=updates)


def _build_controller(settings: GameSettings):
    from shiftgame.engine.cipher import EncryptionEngine
    from shiftgame.engine.round import RoundController

    engine = EncryptionEngine(shift_source=settings.shift_source())
    return RoundController(engine, reset_from_plaintext=settings.reset_from_plaintext)


def _start(ctx: click.Context, seed, reset_from_plaintext) -> GameSettings:
    settings = _apply_overrides(ctx.obj["settings"], seed, reset_from_plaintext)
    log_file = setup_logging(settings.log_dir, debug=ctx.obj["debug"])

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info(f"Shift game starting: {ctx.info_name}")
    logger.info(f"Seed: {settings.seed if settings.seed is not None else 'random'}")
    logger.info(f"Reset from plaintext: {settings.reset_from_plaintext}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)
    return settings


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging on the console')
@click.pass_context
def main(ctx: click.Context, debug: bool):
    """Caesar Shift Game."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["settings"] = load_settings()


@main.command()
@click.option('--word', default=None, help='Starting word (lowercase a-z, 4+ letters)')
@click.option('--seed', type=int, default=None, help='Seed for the shift generator')
@click.option('--show-shift', is_flag=True, help='Print the secret shift')
@click.option('--reset-from-plaintext', is_flag=True,
              help='Re-encrypt the original word on reset')
@click.pass_context
def play(ctx: click.Context, word: str | None, seed: int | None, show_shift: bool,
         reset_from_plaintext: bool):
    """Play the game interactively."""
    from shiftgame.console import ConsoleSession
    from shiftgame.engine.validators import WordValidator
    from shiftgame.text_loader import get_loader

    if word is not None:
        result = WordValidator().validate(word)
        if not result.valid:
            raise click.BadParameter(result.rejection_reason, param_hint="--word")

    settings = _start(ctx, seed, reset_from_plaintext)
    logger = logging.getLogger(__name__)

    session = ConsoleSession(
        _build_controller(settings),
        get_loader().game_text(settings.text_file),
        output_fn=click.echo,
        show_shift=show_shift,
    )

    try:
        session.run(word)
    except (EOFError, KeyboardInterrupt):
        click.echo()
        logger.info("Input closed, ending session")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Shift game shutdown")


@main.command()
@click.option('--seed', type=int, default=None, help='Seed for the shift generator')
@click.option('--reset-from-plaintext', is_flag=True,
              help='Re-encrypt the original word on reset')
@click.pass_context
def demo(ctx: click.Context, seed: int | None, reset_from_plaintext: bool):
    """Run the scripted demonstration."""
    from shiftgame.console import ScriptedSession
    from shiftgame.text_loader import get_loader

    settings = _start(ctx, seed, reset_from_plaintext)
    logger = logging.getLogger(__name__)

    loader = get_loader()
    session = ScriptedSession(
        _build_controller(settings),
        loader.game_text(settings.text_file),
        loader.demo_script(),
        output_fn=click.echo,
    )

    try:
        session.run()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Shift game shutdown")


if __name__ == "__main__":
    main()
