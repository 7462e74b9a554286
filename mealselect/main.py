import argparse
import logging
import random
import sys

from pydantic import ValidationError

from mealselect.domain.GoalWeights import GoalWeights
from mealselect.infra.Catalog_Repository import load_candidate_meals
from mealselect.logic.difficulty.estimator import estimate
from mealselect.logic.planning.scheduler import PlanScheduler
from mealselect.logic.reporting.plan_summary import summarize_plan
from mealselect.logic.selection.compatibility import filter_compatible_meals
from mealselect.utilities.config import LOG_LEVEL, RANDOM_SEED, PLAN_DAYS, MEALS_PER_DAY
from mealselect.utilities.validators import DifficultyRequestInput

logger = logging.getLogger("mealselect")


def _csv(value: str):
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mealselect", description="Weighted cultural meal selection")
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="generate a meal plan from the catalog")
    plan.add_argument("--days", type=int, default=PLAN_DAYS)
    plan.add_argument("--meals-per-day", type=int, default=MEALS_PER_DAY)
    plan.add_argument("--catalog", default=None, help="JSON catalog of candidate meals")
    plan.add_argument("--seed", type=int, default=RANDOM_SEED)
    plan.add_argument("--culture", type=_csv, default=[], help="comma separated cultural backgrounds")
    plan.add_argument("--diet", type=_csv, default=[], help="comma separated dietary restrictions")
    plan.add_argument("--max-cook-time", type=int, default=None, help="minutes")
    plan.add_argument("--max-difficulty", type=float, default=None)
    for name in GoalWeights.FIELDS:
        plan.add_argument(f"--{name}", type=float, default=0.5, help=f"{name} weight in [0, 1]")

    difficulty = sub.add_parser("difficulty", help="estimate the difficulty of a recipe request")
    difficulty.add_argument("description")
    difficulty.add_argument("--ingredients", default=None, help="comma separated ingredient list")
    difficulty.add_argument("--cuisine", default=None)
    difficulty.add_argument("--recipe-type", default=None)
    return parser


def run_plan(args) -> int:
    weights = GoalWeights.from_dict({name: getattr(args, name) for name in GoalWeights.FIELDS})
    candidates = filter_compatible_meals(load_candidate_meals(args.catalog), args.culture, args.diet,
                                         max_cook_time=args.max_cook_time, max_difficulty=args.max_difficulty)
    if not candidates:
        logger.warning("No compatible catalog meals; every slot will be generic")
    scheduler = PlanScheduler(candidates, rng=random.Random(args.seed))
    plan = scheduler.generate(args.days, args.meals_per_day, weights)
    print(plan)
    summary = summarize_plan(plan)
    print(f"Cultural meals: {summary['cultural_meals_used']}/{summary['optimal_cultural_meal_count']} target "
          f"({summary['cultural_percentage']:.1f}% of {summary['total_meals']}, "
          f"{'within' if summary['within_range'] else 'outside'} the 20-35% range)")
    if summary['cultures']:
        print("Cultures: " + ", ".join(f"{c} x{n}" for c, n in sorted(summary['cultures'].items()))
              + f" (variety {summary['variety_score']:.2f})")
    for recommendation in summary['recommendations']:
        print(f"- {recommendation}")
    return 0


def run_difficulty(args) -> int:
    request = DifficultyRequestInput(description=args.description, ingredients=args.ingredients,
                                     cuisine=args.cuisine, recipe_type=args.recipe_type)
    result = estimate(request.description, request.ingredients, request.cuisine, request.recipe_type)
    print(result)
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    try:
        if args.command == "plan":
            return run_plan(args)
        return run_difficulty(args)
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
