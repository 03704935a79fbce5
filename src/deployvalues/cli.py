"""Command-line entry point: render a values file and optionally deploy with it."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

import yaml

from deployvalues.core.constants import CONFIG_FILE, VALUES_ARG
from deployvalues.core.env import MissingSecretError, resolve
from deployvalues.core.mapping import MalformedMappingError, load_mapping_arg
from deployvalues.core.masking import masked_log
from deployvalues.core.render import render
from deployvalues.io.config import load_config, save_config
from deployvalues.io.output import (
    emit_log, emit_masked, emit_unresolved, emit_warnings, write_values,
)
from deployvalues.pacts.stores import MappingSecretStore, build_store


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deployvalues",
        description="Render a deployment values template from JSON variable and "
                    "secret mappings, then optionally run the deployment command "
                    "given after '--'",
    )
    parser.add_argument(
        "--template",
        help="Values template containing ${NAME} / ${NAME:-default} placeholders",
    )
    parser.add_argument(
        "--variables", default="",
        help="JSON object of NAME -> value, or @file to read it from a file",
    )
    parser.add_argument(
        "--secrets", default="",
        help="JSON object of NAME -> secret name, or @file to read it from a file",
    )
    parser.add_argument(
        "--secret-store",
        help="Where secrets are looked up: env, env:PREFIX, file:DIR, "
             "manifest:PATH[#SECRET] (default from config: env)",
    )
    parser.add_argument(
        "--output",
        help="Where to write the rendered document (default: a temporary file)",
    )
    parser.add_argument(
        "--config", default=CONFIG_FILE,
        help=f"Config file (default: {CONFIG_FILE})",
    )
    parser.add_argument(
        "--strict-secrets", action="store_true",
        help="Fail when a referenced secret is missing instead of binding an empty value",
    )
    parser.add_argument(
        "--fail-on-unresolved", action="store_true",
        help="Fail when placeholders remain in the rendered document",
    )
    parser.add_argument(
        "--init-config", action="store_true",
        help="Write the config file with default settings",
    )
    return parser


def _split_command(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first '--' into (options, deployment command)."""
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1:]
    return argv, []


def _build_command(command: list[str], values_path: str) -> list[str]:
    """Insert the rendered file path into the deployment command."""
    if VALUES_ARG in command:
        return [values_path if arg == VALUES_ARG else arg for arg in command]
    return command + ["-f", values_path]


def run_command(command: list[str], values_path: str) -> int:
    """Run the deployment command and return its exit code unchanged."""
    cmd = _build_command(command, values_path)
    print(f"Running: {' '.join(cmd)}", file=sys.stderr)
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        print(f"Error: command not found: {cmd[0]}", file=sys.stderr)
        return 127


def _report_failed_resolution(exc: MissingSecretError, marker: str) -> None:
    """Print everything known about a failed strict resolution."""
    emit_log(exc.result.log)
    emit_warnings(exc.result.warnings)
    emit_masked(masked_log(exc.result.env, marker))
    print(f"Error: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    options, command = _split_command(sys.argv[1:] if argv is None else list(argv))
    args = parser.parse_args(options)

    try:
        config = load_config(args.config)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.init_config:
        save_config(args.config, config)
        print(f"Wrote {args.config}", file=sys.stderr)
        if not args.template:
            return 0
    if not args.template:
        parser.error("--template is required")

    strict = args.strict_secrets or config["strict_secrets"]
    fail_on_unresolved = args.fail_on_unresolved or config["fail_on_unresolved"]
    marker = str(config["redaction_marker"])

    # Step 1: parse mappings (fatal before anything is looked up)
    try:
        variables = load_mapping_arg(args.variables, "variables")
        secrets = load_mapping_arg(args.secrets, "secrets")
    except MalformedMappingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # Step 2: read template
    template_path = Path(args.template)
    try:
        template = template_path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read template {template_path}: {exc.strerror}", file=sys.stderr)
        return 1

    # Step 3: resolve
    # Without secret references no store is contacted
    lookup = MappingSecretStore()
    if secrets:
        try:
            lookup = build_store(args.secret_store or str(config["secret_store"]))
        except (ValueError, OSError, yaml.YAMLError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Secret store: {lookup.name}", file=sys.stderr)
    try:
        result = resolve(variables, secrets, lookup, strict=strict)
    except MissingSecretError as exc:
        _report_failed_resolution(exc, marker)
        return 1
    emit_log(result.log)
    emit_warnings(result.warnings)

    # Step 4: render, report, then write
    rendered = render(template, result.env)
    emit_unresolved(rendered.unresolved)
    emit_masked(masked_log(result.env, marker))
    suffix = template_path.suffix or ".yaml"
    output = args.output or config["output"]
    try:
        values_path = write_values(rendered.text, output, suffix=suffix)
    except OSError as exc:
        print(f"Error: cannot write rendered document to {output or 'a temporary file'}: "
              f"{exc.strerror or exc}", file=sys.stderr)
        return 1

    if fail_on_unresolved and rendered.unresolved:
        print(f"Error: {len(rendered.unresolved)} unresolved placeholder(s) in "
              f"{values_path}", file=sys.stderr)
        return 1

    # Step 5: hand the document to the deployment tool
    if command:
        return run_command(command, os.path.abspath(values_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
