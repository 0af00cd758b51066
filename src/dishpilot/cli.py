"""Command line entry point: rank catalog recipes for a list of labels."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .exceptions import DishPilotError
from .presentation import RecipeCard, RecipeDetail, UnitSystem
from .reporting import matches_to_dataframe
from .session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend recipes from the ingredients recognized in a photo"
    )
    parser.add_argument(
        "labels",
        nargs="*",
        help="Raw classifier labels, e.g. 'granny smith, red delicious'. "
        "Uses the built-in simulated pantry when omitted.",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path or URL of the recipe catalog (default: bundled sample catalog)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Minimum share of a recipe's main ingredients that must be available",
    )
    parser.add_argument("--language", type=str, default=None, help="Display language code")
    parser.add_argument(
        "--units",
        type=str,
        choices=[unit.value for unit in UnitSystem],
        default=None,
        help="Unit system for the recipe detail view",
    )
    parser.add_argument(
        "--show",
        type=str,
        metavar="RECIPE_ID",
        default=None,
        help="Print the full recipe with this id",
    )
    parser.add_argument(
        "--output-csv",
        type=str,
        default=None,
        help="Write the ranking to this CSV file",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def format_card(card: RecipeCard) -> str:
    lines = [
        card.title,
        f"  Match: {card.match_label}",
        f"  Total Time: {card.total_time} mins | Difficulty: {card.difficulty}",
        f"  Zero-Waste Tip: {card.leftover_tip}",
        f"  Unused Items: {', '.join(card.unused_ingredients)}",
    ]
    return "\n".join(lines)


def format_detail(detail: RecipeDetail) -> str:
    lines = [
        detail.title,
        f"Prep: {detail.prep_time} mins | Cook: {detail.cook_time} mins "
        f"| Difficulty: {detail.difficulty}",
        "",
        f"Ingredients ({detail.unit_system.value})",
    ]
    lines.extend(f"  {line.quantity} {line.name}" for line in detail.ingredients)
    lines.append("")
    lines.append("Instructions")
    lines.extend(f"  {step.label}: {step.text}" for step in detail.steps)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = Settings.from_env().replace(
            catalog=args.catalog,
            language=args.language,
            match_threshold=args.threshold,
            unit_system=args.units,
        )
        session = Session.from_settings(settings)
    except DishPilotError as e:
        logger.error(str(e))
        return 1

    try:
        result = session.recognize(args.labels) if args.labels else session.simulate()
    except DishPilotError as e:
        logger.error(str(e))
        return 1

    print(f"Ingredients: {', '.join(sorted(result.ingredients))}")
    if not result.cards:
        print(
            f"No recipes found matching at least {session.threshold * 100:.0f}% "
            "of the required ingredients."
        )
    for card in result.cards:
        print()
        print(format_card(card))

    if args.output_csv:
        df = matches_to_dataframe(result.matches, result.ingredients, session.language)
        try:
            df.to_csv(args.output_csv, index=False)
        except OSError as e:
            logger.error(f"Could not write {args.output_csv}: {e}")
            return 1
        logger.info(f"Wrote {len(df)} rows to {args.output_csv}")

    if args.show:
        try:
            detail = session.open_recipe(args.show)
        except DishPilotError as e:
            logger.error(str(e))
            return 1
        print()
        print(format_detail(detail))

    return 0


if __name__ == "__main__":
    sys.exit(main())
