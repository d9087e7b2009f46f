"""
Command-line interface for shopping-ticket.

Provides commands for printing tickets of sample and YAML-described carts,
checking discounts, and initializing configuration.
"""

import click
import sys
from typing import Optional

from .. import __version__
from ..utils.logger_setup import LoggerManager, get_logger
from .cart import Cart
from .cart_file import load_cart
from .config import ConfigManager
from .constants import DEMO_ITEMS, NO_DISCOUNT_TEXT
from .discount import calculate_discount
from .errors import CartFileError, InvalidArgumentError
from .models import ItemType

logger = get_logger(__name__)


def build_demo_cart() -> Cart:
    """Cart with the sample items printed by the ``demo`` command."""
    cart = Cart()
    for title, price, quantity, item_type in DEMO_ITEMS:
        cart.add_item(title, price, quantity, item_type)
    return cart


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
              case_sensitive=False), help='Override the configured log level')
@click.option('--verbose', '-v', is_flag=True, help='Write log messages to stderr')
@click.pass_context
def cli(ctx, log_level, verbose):
    """Shopping ticket - cart discounts and fixed-width receipts."""
    config_manager = ConfigManager()
    config = config_manager.load()

    # 'init' must stay usable to replace a broken configuration
    if ctx.invoked_subcommand != 'init':
        errors = config_manager.validate(config)
        if errors:
            click.echo("❌ Configuration errors:", err=True)
            for error in errors:
                click.echo(f"  - {error}", err=True)
            sys.exit(1)

    LoggerManager.setup_logging(
        log_file=config.logging.file,
        level=log_level or config.logging.level,
        console=verbose or config.logging.console,
    )

    ctx.obj = {'config_manager': config_manager, 'config': config}


@cli.command()
@click.option('--overwrite', is_flag=True, help='Overwrite existing configuration')
@click.pass_context
def init(ctx, overwrite):
    """Initialize configuration in current directory."""
    config_manager = ctx.obj['config_manager']

    if config_manager.init_config(overwrite=overwrite):
        click.echo("✓ Configuration initialized successfully")
        click.echo(f"  Config file: {config_manager.config_file}")
    else:
        click.echo("Configuration already exists. Use --overwrite to replace it.")


@cli.command()
def demo():
    """Print the ticket of a sample cart."""
    click.echo(build_demo_cart().format_ticket())


@cli.command()
@click.argument('cart_file', required=False, type=click.Path(dir_okay=False))
@click.pass_context
def ticket(ctx, cart_file: Optional[str]):
    """Print the ticket of a cart described in a YAML file."""
    config_manager = ctx.obj['config_manager']
    config = ctx.obj['config']

    if cart_file is None:
        default_file = config_manager.resolve_cart_file(config)
        if default_file is None:
            click.echo("❌ Error: no cart file given and no default configured", err=True)
            sys.exit(1)
        cart_file = str(default_file)

    try:
        cart = load_cart(cart_file)
    except (CartFileError, InvalidArgumentError) as e:
        logger.error(f"Cannot build cart from {cart_file}: {e}")
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    click.echo(cart.format_ticket())


@cli.command()
@click.argument('item_type', type=click.Choice([t.name for t in ItemType], case_sensitive=False))
@click.argument('quantity', type=click.IntRange(min=1))
def discount(item_type: str, quantity: int):
    """Show the discount for QUANTITY items of ITEM_TYPE."""
    percent = calculate_discount(ItemType.parse(item_type), quantity)
    click.echo(NO_DISCOUNT_TEXT if percent == 0 else f"{percent}%")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
