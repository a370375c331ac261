#!/usr/bin/env python3
"""
Sink Check
Ships one test line through every sink configured in the environment
(AWS_LOGGER_SINKS, AWS_LOGGER_CLOUDWATCH_*, AWS_LOGGER_KINESIS_*) and reports
which ones accepted it.
"""

import argparse
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from aws_logger import SinkError, sinks_from_env

console = Console()


def check_sinks(level: str, message: str) -> list[dict]:
    results = []
    for sink in sinks_from_env():
        result = {"sink": type(sink).__name__, "region": sink.config.region, "error": None}
        console.print(f"  Sending to {result['sink']} ({result['region']})...")
        try:
            sink.log(level, message, {"check": "sink_check"})
        except SinkError as e:
            result["error"] = str(e)
        results.append(result)
    return results


def display_results(results: list[dict]):
    table = Table(title="Sink Check Results", show_header=True)
    table.add_column("Sink", style="cyan")
    table.add_column("Region", style="yellow")
    table.add_column("Status", style="magenta")

    for result in results:
        status = f"❌ {result['error'][:80]}" if result["error"] else "✅ Accepted"
        table.add_row(result["sink"], result["region"], status)

    console.print("\n")
    console.print(table)


def main() -> int:
    parser = argparse.ArgumentParser(description="Ship a test line to configured AWS log sinks")
    parser.add_argument("--level", default="info", help="Level of the test line")
    parser.add_argument("--message", default="aws-logger sink check from {check}", help="Test message")
    parser.add_argument("--env-file", default=None, help="Load variables from this .env file")
    args = parser.parse_args()

    load_dotenv(args.env_file)

    console.print("[bold magenta]aws-logger Sink Check[/bold magenta]")
    console.print("=" * 50)

    try:
        results = check_sinks(args.level, args.message)
    except SinkError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        return 2

    if not results:
        console.print("[yellow]No sinks configured. Set AWS_LOGGER_SINKS=cloudwatch,kinesis[/yellow]")
        return 1

    display_results(results)

    failed = sum(1 for r in results if r["error"])
    if failed:
        console.print(f"[red]❌ {failed}/{len(results)} sinks rejected the test line[/red]")
        return 1
    console.print(f"[green]✅ All {len(results)} sinks accepted the test line[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
