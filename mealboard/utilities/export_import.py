"""
Export and Import functionality for the planner document and grocery list.
"""
import json
from datetime import datetime
from pathlib import Path
import logging

from mealboard.domain.Plan import Plan
from mealboard.domain.RecipeCatalog import RecipeCatalog
from mealboard.domain.errors import RemoteFailure
from mealboard.infra.Recipe_Repository import RecipeRepository
from mealboard.infra.State_Repository import StateRepository

logger = logging.getLogger(__name__)


class StateExporter:
    """Write a board to disk as the persisted JSON document or as copyable grocery text."""

    def __init__(self, plan: Plan):
        self.plan = plan

    def export_state(self, output_path: Path = None) -> Path:
        """Export the planner document to a JSON file."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path(f"planner_state_{timestamp}.json")

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.plan.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Exported planner state to {output_path}")
        return Path(output_path)

    def export_grocery_text(self, output_path: Path = None) -> Path:
        """Export the unchecked grocery lines, exactly as copied to the clipboard."""
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path(f"grocery_list_{timestamp}.txt")

        text = self.plan.export_text()
        # newline='' keeps the CRLF separators as they are
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        logger.info(f"Exported {len(text.splitlines())} grocery lines to {output_path}")
        return Path(output_path)


class StateImporter:
    """Import a planner document from JSON into a state store."""

    def __init__(self, state_repo):
        self.state_repo = state_repo

    def read_document(self, input_path: Path) -> dict:
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Import failed: {e}")
            raise RemoteFailure(f"Couldn't read {input_path}.") from e
        if not isinstance(document, dict):
            raise RemoteFailure(f"{input_path} does not contain a planner document.")
        return document

    def import_state(self, user_id: str, input_path: Path) -> dict:
        """Normalize the document through Plan (padding, defaults) and upsert it for user_id."""
        document = Plan.from_dict(self.read_document(input_path)).to_dict()
        self.state_repo.put_state(user_id, document)
        logger.info(f"Imported planner state for user {user_id} from {input_path}")
        return document


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='Export/Import meal board data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--user', required=True, help='User id owning the board')
    parser.add_argument('--type', choices=['state', 'grocery'], default='state', help='What to export')
    parser.add_argument('--file', help='Input/output file path')

    args = parser.parse_args(argv)
    state_repo = StateRepository()

    try:
        if args.action == 'export':
            catalog = RecipeCatalog(RecipeRepository().list_recipes(args.user))
            plan = Plan.from_dict(state_repo.get_state(args.user) or {}, catalog)
            exporter = StateExporter(plan)
            output = Path(args.file) if args.file else None
            if args.type == 'grocery':
                result = exporter.export_grocery_text(output)
            else:
                result = exporter.export_state(output)
            print(f"✓ Exported to: {result}")
        else:
            if not args.file:
                parser.error("--file is required for import")
            StateImporter(state_repo).import_state(args.user, Path(args.file))
            print(f"✓ Successfully imported from: {args.file}")
    except RemoteFailure as e:
        print(f"✗ {e.message}")
        return 1
    return 0


# CLI interface
if __name__ == "__main__":
    raise SystemExit(main())
