from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

from generator.errors import GenerationError  # noqa: E402
from generator.generator import CountryDataGenerator, GeneratorConfig  # noqa: E402
from generator.sources import (  # noqa: E402
    EmbeddedDataLoader,
    FileDataLoader,
    FileTemplateProvider,
    OSFileWriter,
    PackageTemplateProvider,
)
from utils.config import GeneratorSettings, load_generator_config  # noqa: E402
from utils.logging import get_logger, setup_logging  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Generate src/countries/countries_data.py from the JSON sources.")
    ap.add_argument("--config", default=None, help="YAML config (default: COUNTRIES_GENERATE_CONFIG or config/generate.yaml)")
    ap.add_argument("--output", default=None, help="Override generator.output_path")
    ap.add_argument("--primary", default=None, help="ISO-3166 JSON file (default: bundled data)")
    ap.add_argument("--alternate", default=None, help="Country info JSON file (default: bundled data)")
    ap.add_argument("--template", default=None, help="Template file (default: bundled template)")
    ap.add_argument("--repo-url", default=None, help="Override generator.repo_url")
    ap.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    ap.add_argument(
        "--check",
        action="store_true",
        help="Render in memory and exit 1 if the output file is missing or out of date (nothing is written)",
    )
    args = ap.parse_args(argv)
    if (args.primary is None) != (args.alternate is None):
        ap.error("--primary and --alternate must be given together")
    return args


def build_generator(settings: GeneratorSettings, args: argparse.Namespace) -> CountryDataGenerator:
    primary = args.primary or settings.primary_source
    alternate = args.alternate or settings.alternate_source
    if primary is not None and alternate is not None:
        loader = FileDataLoader(primary, alternate)
    else:
        loader = EmbeddedDataLoader()

    template = args.template or settings.template_path
    provider = FileTemplateProvider(template) if template else PackageTemplateProvider()

    return CountryDataGenerator(
        GeneratorConfig(
            data_loader=loader,
            file_writer=OSFileWriter(atomic=settings.atomic_write),
            template_provider=provider,
            output_path=args.output or settings.output_path,
            repo_url=args.repo_url or settings.repo_url,
        )
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(level=args.log_level)
    logger = get_logger(component="generate_countries")

    try:
        settings = load_generator_config(args.config)
    except (OSError, ValueError) as e:
        logger.error("config_invalid", err=str(e))
        return 2

    generator = build_generator(settings, args)

    try:
        if args.check:
            code, result = generator.render()
            target = Path(generator.output_path)
            try:
                current = target.read_text(encoding="utf-8") if target.exists() else None
            except (OSError, UnicodeDecodeError) as e:
                logger.error("generated_file_out_of_date", path=str(target), err=str(e))
                return 1
            if current != code:
                logger.error("generated_file_out_of_date", path=str(target), countries=result.countries)
                return 1
            logger.info("generated_file_up_to_date", path=str(target), countries=result.countries)
            return 0

        generator.generate()
    except GenerationError as e:
        logger.error("generation_failed", err_type=type(e).__name__, err=str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
