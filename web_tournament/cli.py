#!/usr/bin/env python3
"""CLI for web tournament research."""
import asyncio
import argparse
import sys
from pathlib import Path

# Load environment before settings are built
from dotenv import load_dotenv
load_dotenv(Path.cwd() / '.env', override=True)

# Suppress logfire warnings
import warnings
warnings.filterwarnings('ignore', message='Logfire')

import logfire

try:
    logfire.configure(service_name='web-tournament', send_to_logfire='if-token-present', console=False)
except Exception:
    # Keep CLI usable even when observability config is missing
    pass

from .config import ResearchSettings
from .errors import ResearchError
from .messages import format_listing
from .search import SearchClient
from .tournament import answer_research_question


def print_status(msg: str):
    """Print status message."""
    print(f"\033[90m→ {msg}\033[0m", file=sys.stderr)


async def run_search(query: str, settings: ResearchSettings) -> str:
    """Print the search listing for a query."""
    try:
        results = await SearchClient(settings).search(query)
    except ResearchError as e:
        print(f"\nSearch failed: {e}\n")
        return ""

    listing = format_listing(query, results, settings.max_results)
    print(listing)
    return listing


async def run_research(query: str, settings: ResearchSettings, output_file: str = None) -> str:
    """Run one research tournament."""
    print(f"\n{'='*60}")
    print(f"  Web Tournament")
    print(f"{'='*60}")
    print(f"\nQuestion: {query}\n")

    print_status('Searching and comparing sources...')
    answer = await answer_research_question(query, settings)
    print_status(f'Finished: {answer.status.value}')

    text = answer.render()
    print(f"\n{'='*60}")
    print(f"  ANSWER")
    print(f"{'='*60}\n")
    print(text)

    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"\n\033[90mAnswer saved to: {output_file}\033[0m")

    return text


async def interactive_mode(settings: ResearchSettings):
    """Run in interactive mode."""
    print(f"\n{'='*60}")
    print(f"  Web Tournament - Interactive Mode")
    print(f"{'='*60}")
    print(f"\nCandidates per question: {settings.max_candidates}")
    print("\nEnter your question (or 'quit' to exit):\n")

    while True:
        try:
            query = input("Question: ").strip()
            if query.lower() in ('quit', 'q', 'exit'):
                print("\nGoodbye!")
                break

            if not query:
                print("Please enter a question.\n")
                continue

            await run_research(query, settings)
            print()

        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye!")
            break


def main():
    parser = argparse.ArgumentParser(
        description='Web Tournament CLI - answer a question from the best web source',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "best laptops 2024"
  %(prog)s --search-only "python asyncio tutorial"
  %(prog)s -o answer.txt "How tall is the Eiffel Tower?"
  %(prog)s -i  # Interactive mode
        """
    )

    parser.add_argument(
        'query',
        nargs='?',
        help='Question to research'
    )
    parser.add_argument(
        '-s', '--search-only',
        action='store_true',
        help='Only list search results, do not run the tournament'
    )
    parser.add_argument(
        '-o', '--output',
        help='Output file for the answer'
    )
    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help='Run in interactive mode'
    )

    args = parser.parse_args()
    settings = ResearchSettings()

    if args.interactive or not args.query:
        asyncio.run(interactive_mode(settings))
    elif args.search_only:
        asyncio.run(run_search(args.query, settings))
    else:
        asyncio.run(run_research(args.query, settings, args.output))


if __name__ == '__main__':
    main()
