import os
import sys
import argparse
from loguru import logger
from .exceptions import NanoJasonError
from .modes import MODES
from .sdk import NanoJasonSDK
from .utils import setup_logging, load_config, read_batch_file


def launch_ui(seed=None):
    """Launch the Gradio User Interface."""
    from .ui import create_interface
    demo = create_interface(seed=seed)
    demo.launch()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Natural language to Jason format translator and prompt optimizer")
    parser.add_argument("text", nargs='?', help="Natural language description to process")
    parser.add_argument("--mode", choices=list(MODES), help="Pipeline mode (default: general)")
    parser.add_argument("--batch", help="Path to a text file with one prompt per line")
    parser.add_argument("--template", help="Use a quick template of the selected mode as input")
    parser.add_argument("--list-templates", action="store_true", help="List the quick templates of the selected mode")
    parser.add_argument("--output-dir", help="Directory to save .json results")
    parser.add_argument("--report", help="Write a batch report (.xlsx or .pdf)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible phrase selection")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--log-level", help="Log level (default: INFO)")
    parser.add_argument("--gui", action="store_true", help="Launch Gradio GUI")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config_data = {}
    if args.config:
        try:
            config_data = load_config(args.config)
        except NanoJasonError as e:
            setup_logging()
            logger.error(e.message)
            sys.exit(1)

    # Command line flags win over the config file
    mode = args.mode or config_data.get("mode", "general")
    seed = args.seed if args.seed is not None else config_data.get("seed")
    output_dir = args.output_dir or config_data.get("output_dir")
    log_level = args.log_level or config_data.get("log_level", "INFO")
    indent = config_data.get("indent", 2)

    if args.gui:
        launch_ui(seed=seed)
        return

    setup_logging(log_level.upper())

    try:
        sdk = NanoJasonSDK(seed=seed, indent=indent, show_progress=bool(args.batch))

        if args.list_templates:
            for name, text in sdk.templates(mode).items():
                print(f"{name}: {text}")
            return

        if args.batch:
            prompts = read_batch_file(args.batch)
            records = sdk.run_batch(mode, prompts)
        else:
            text = sdk.template(mode, args.template) if args.template else args.text
            if not text:
                parser.print_help()
                print("\nError: text is required unless --batch, --template, --list-templates or --gui is specified.")
                sys.exit(1)
            records = [sdk.run(mode, text)]
    except NanoJasonError as e:
        logger.error(e.message)
        sys.exit(1)

    for record in records:
        print(record.to_json(indent=indent))
        if output_dir:
            sdk.save(record, output_dir, mode=mode)

    if args.report:
        from .report import ReportGenerator
        reporter = ReportGenerator(records)
        extension = os.path.splitext(args.report)[1].lower()
        if extension == ".pdf":
            reporter.generate_pdf(args.report, metadata={"mode": mode, "source": args.batch or "command line"})
        else:
            reporter.generate_excel(args.report)
        logger.info(f"Report written to {args.report}")


if __name__ == "__main__":
    main()
