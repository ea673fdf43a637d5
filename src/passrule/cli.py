"""Command-line interface for PassRule.

This module provides commands to check passwords against the configured
policy and to generate compliant passwords.
"""

from typing import NoReturn

import click

from passrule.core.config import get_settings
from passrule.core.exceptions import PolicyError
from passrule.core.logging import configure_logging, get_logger
from passrule.domain.entities.password_data import PasswordData
from passrule.domain.entities.word_dictionary import WordDictionary
from passrule.domain.services.password_generator import PasswordGenerator
from passrule.domain.services.password_validator import PasswordValidator
from passrule.domain.services.policy_builder import build_rules, character_rules
from passrule.infrastructure.messages.message_resolver import MessageResolver


@click.group()
@click.version_option(version="0.1.0", prog_name="PassRule")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides PASSRULE_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """PassRule - password policy validation and generation."""
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.command()
@click.argument("password")
@click.option("--username", type=str, default=None, help="Username of the password owner")
@click.option(
    "--dictionary",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Word list, one word per line (overrides PASSRULE_DICTIONARY_PATH)",
)
def validate(password: str, username: str | None, dictionary: str | None) -> None:
    """Check PASSWORD against the configured policy."""
    settings = get_settings()
    logger = get_logger(__name__)

    dictionary_path = dictionary or settings.dictionary_path
    words = None
    if dictionary_path:
        words = WordDictionary.from_file(
            dictionary_path, case_sensitive=settings.dictionary_case_sensitive
        )
        logger.info("Dictionary loaded", path=dictionary_path, word_count=len(words))

    resolver = MessageResolver.from_file(settings.messages_path) if settings.messages_path else None
    validator = PasswordValidator(build_rules(settings, words), message_resolver=resolver)

    result = validator.validate(PasswordData(password, username=username))
    if result.valid:
        click.echo("Password is valid.")
        return

    for message in validator.get_messages(result):
        click.echo(message)
    raise SystemExit(1)


@cli.command()
@click.option("--length", type=int, default=None, help="Password length (overrides config)")
@click.option(
    "--count", type=click.IntRange(min=1), default=1, show_default=True, help="Number of passwords"
)
def generate(length: int | None, count: int) -> None:
    """Generate passwords with upper case, lower case, digit and special characters."""
    settings = get_settings()
    generator = PasswordGenerator()
    password_length = settings.generate_length if length is None else length
    try:
        for _ in range(count):
            click.echo(generator.generate(password_length, character_rules()))
    except PolicyError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)


@cli.command()
def info() -> None:
    """Display the effective policy configuration."""
    settings = get_settings()

    click.echo(f"""
PassRule v{settings.app_version}
{'=' * 40}

Policy:
  Length:          {settings.min_length}-{settings.max_length}
  Characteristics: {settings.characteristics_required} of 4
  Sequence Length: {settings.sequence_length} (wrap: {settings.sequence_wrap})
  Repeat Length:   {settings.repeat_length}
  Username Check:  {settings.check_username}
  Dictionary:      {settings.dictionary_path or '-'}

Generator:
  Length:          {settings.generate_length}

Logging:
  Level:           {settings.log_level}
  Format:          {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `passrule` command is run
    or when using `python -m passrule`.
    """
    cli()


if __name__ == "__main__":
    main()
