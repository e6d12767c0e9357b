import argparse
import logging
import sys

from supabase import create_client

from backend.core.program_catalog import ProgramCatalog, seed_presets
from backend.settings import get_settings
from infrastructure.db import SupabaseProgramRepository, SupabaseTemplateRepository


def list_presets(catalog: ProgramCatalog) -> None:
    for program in catalog.programs():
        deloads = [w.week_number for w in program.weeks if w.is_deload]
        print(
            f"{program.id}: {program.name} "
            f"({program.duration_weeks} weeks, {program.progression_pattern.value}"
            f"{', deload weeks ' + ', '.join(map(str, deloads)) if deloads else ''})"
        )
    for template in catalog.templates():
        print(f"  template {template.id}: {template.name} ({template.exercise_count} exercises)")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Manage preset training programs")
    parser.add_argument("--catalog", help="Catalog directory (default: settings / shared/catalog)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list-presets", help="Print the preset catalog")
    subparsers.add_parser("seed-presets", help="Insert missing presets into Supabase")

    args = parser.parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        catalog = ProgramCatalog.load(args.catalog or settings.catalog_path)

        if args.command == "list-presets":
            list_presets(catalog)
            return

        if not settings.supabase_configured:
            print("Error: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set", file=sys.stderr)
            sys.exit(1)

        client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        programs_added, templates_added = seed_presets(
            SupabaseProgramRepository(client),
            SupabaseTemplateRepository(client),
            catalog=catalog,
        )
        print(f"Seeded {programs_added} programs and {templates_added} templates")

    except FileNotFoundError as e:
        print(f"Error: Catalog file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: Invalid catalog: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
