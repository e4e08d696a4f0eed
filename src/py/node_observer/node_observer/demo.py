"""Walk-through of subscribing, replacing and removing navigator listeners.

Run with ``node-observer-demo`` or ``python -m node_observer.node_observer``.
"""

import logging

import click

from .core import InvalidArgumentError, NodeNavigator
from .listeners import RecordingListener, StatisticsListener, SumListener

STANDARD_LINE_LENGTH = 80
DEMO_LINE_LENGTH = 40
PACKAGE_LOGGER = "node_observer"


def _heading(title: str) -> None:
    click.echo(title)
    click.echo("-" * DEMO_LINE_LENGTH)


def demonstrate_basic_observer() -> None:
    _heading("Demo 1: Basic Observer Functionality")
    numbers = [10, 20, 30, 40, 50]
    navigator = NodeNavigator(numbers)
    listener = RecordingListener("BasicListener")
    navigator.subscribe(listener)

    click.echo(f"Navigating list: {numbers}")
    navigator.navigate()
    click.echo(f"Visited nodes: {listener.visited()}")
    click.echo(f"Total notifications: {listener.notification_count()}")
    click.echo()


def demonstrate_listener_replacement() -> None:
    _heading("Demo 2: Replacing the Listener")
    navigator = NodeNavigator([1, 2, 3, 4, 5])

    recorder = RecordingListener("Logger")
    navigator.subscribe(recorder)
    click.echo("Navigation with Logger:")
    navigator.navigate()
    click.echo(f"Logger recorded: {recorder.visited()}")

    calculator = SumListener()
    navigator.subscribe(calculator)
    click.echo("\nNavigation with Calculator:")
    navigator.navigate()
    click.echo(f"Calculator sum: {calculator.sum()}")

    stats = StatisticsListener()
    navigator.subscribe(stats)
    click.echo("\nNavigation with Statistics:")
    navigator.navigate()
    click.echo(f"Statistics: {stats.summary()}")
    click.echo()


def demonstrate_empty_list() -> None:
    _heading("Demo 3: Empty List Handling")
    navigator = NodeNavigator([])
    listener = RecordingListener("EmptyListListener")
    navigator.subscribe(listener)

    click.echo("Navigating empty list...")
    navigator.navigate()
    click.echo(f"Visited nodes: {listener.visited()}")
    click.echo(f"Total notifications: {listener.notification_count()}")
    click.echo()


def demonstrate_unsubscription() -> None:
    _heading("Demo 4: Unsubscription Behavior")
    navigator = NodeNavigator([100, 200, 300])
    listener = RecordingListener("UnsubscribeTest")
    navigator.subscribe(listener)

    click.echo("Navigation with listener:")
    navigator.navigate()
    click.echo(f"First run - Visited: {listener.visited()}")

    navigator.unsubscribe()
    click.echo("\nNavigation after unsubscribe:")
    navigator.navigate()
    click.echo(f"Second run - Visited: {listener.visited()} (should be unchanged)")
    click.echo()


def demonstrate_error_handling() -> None:
    _heading("Demo 5: Error Handling")

    click.echo("Testing None sequence handling...")
    try:
        NodeNavigator(None)
        click.echo("ERROR: Should have raised!")
    except InvalidArgumentError as exc:
        click.echo(f"Correctly caught error for None sequence: {exc}")

    click.echo("Testing None listener handling...")
    navigator = NodeNavigator([1, 2, 3])
    try:
        navigator.subscribe(None)  # type: ignore[arg-type]
        click.echo("ERROR: Should have raised!")
    except InvalidArgumentError as exc:
        click.echo(f"Correctly caught error for None listener: {exc}")
    click.echo()


DEMONSTRATIONS = [
    demonstrate_basic_observer,
    demonstrate_listener_replacement,
    demonstrate_empty_list,
    demonstrate_unsubscription,
    demonstrate_error_handling,
]


def run_demonstrations() -> int:
    click.echo("=" * STANDARD_LINE_LENGTH)
    click.echo("Observer Pattern Demo")
    click.echo("=" * STANDARD_LINE_LENGTH)
    click.echo()

    try:
        for demonstration in DEMONSTRATIONS:
            demonstration()
    except Exception as exc:
        logging.getLogger(__name__).exception("Demonstration failed.")
        click.echo(f"Error during demonstration: {exc}", err=True)
        return 1

    click.echo("=" * STANDARD_LINE_LENGTH)
    click.echo("All demonstrations completed successfully!")
    click.echo("=" * STANDARD_LINE_LENGTH)
    return 0


@click.command("node-observer-demo")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log every notification and subscription change",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Demonstrate the navigator/listener observer contract."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    ctx.exit(run_demonstrations())


if __name__ == "__main__":
    main()
