#!/usr/bin/env python3
"""Validate a JSON document against a JSON Schema and print the verdict.

Usage: python scripts/validate_json.py --schema movie --data movie.json [--schema-dir DIR]
       [--fail-on-validation-error] [--base-url URL] [--report-dir DIR] [-v]

Runs the evaluation in-process, or against a running provider server when
--base-url is given. Exit codes: 0 valid, 1 invalid, 2 hard failure.
"""
import argparse
import datetime
import json
import logging
import os
import sys
import xml.etree.ElementTree as ET

import requests

from type_provider.client import ProviderClient
from type_provider.config import load_config, merge_config
from type_provider.data_source import ValidateJsonDataSource
from type_provider.documents import load_document_text
from type_provider.logging_utils import configure_logging

logger = logging.getLogger("validate_json")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def print_ok(msg):
    print(f"{GREEN}{msg}{RESET}")


def print_fail(msg):
    print(f"{RED}{msg}{RESET}")


def evaluate_local(schema_text, data_text, fail_on_error):
    """Return a report entry with the same shape as a remote read."""
    resp = ValidateJsonDataSource().read({
        "json_schema": schema_text,
        "json_object": data_text,
        "fail_on_validation_error": fail_on_error,
    })
    return {"state": resp.state, "diagnostics": resp.diagnostics.to_list()}


def evaluate_remote(base_url, timeout, schema_text, data_text, fail_on_error):
    client = ProviderClient(base_url=base_url, timeout=timeout)
    return client.validate_json(schema_text, data_text, fail_on_error)


def exit_code_for(entry):
    if any(d.get("severity") == "error" for d in entry.get("diagnostics") or []):
        return EXIT_FAILURE
    state = entry.get("state") or {}
    return EXIT_VALID if state.get("is_valid") else EXIT_INVALID


def write_reports(report_dir, entry):
    """Write a JSON report and a JUnit XML report; return both paths."""
    os.makedirs(report_dir, exist_ok=True)
    stamp = datetime.datetime.now(datetime.timezone.utc).strftime('%Y%m%dT%H%M%SZ')
    json_fn = os.path.join(report_dir, f"validate_json_{stamp}.json")
    with open(json_fn, "w", encoding="utf-8") as f:
        json.dump(entry, f, indent=2)

    testsuite = ET.Element('testsuite', name='validate_json', tests='1')
    tc = ET.SubElement(testsuite, 'testcase', classname='validate_json', name=f"{entry['schema']} {entry['data']}")
    errors = [d for d in entry.get("diagnostics") or [] if d.get("severity") == "error"]
    state = entry.get("state") or {}
    if errors:
        failure = ET.SubElement(tc, 'error', message=errors[0].get("summary", "error"))
        failure.text = "\n".join(d.get("detail", "") for d in errors)
    elif not state.get("is_valid"):
        failure = ET.SubElement(tc, 'failure', message='schema_validation_failed')
        failure.text = state.get("validation_errors") or ""
    junit_fn = os.path.join(report_dir, f"validate_json_junit_{stamp}.xml")
    ET.ElementTree(testsuite).write(junit_fn, encoding='utf-8', xml_declaration=True)
    return json_fn, junit_fn


def build_parser():
    p = argparse.ArgumentParser(description="Validate a JSON document against a JSON Schema")
    p.add_argument("--schema", required=True, help="schema file path or name under --schema-dir")
    p.add_argument("--data", required=True, help="data file path or name under --schema-dir")
    p.add_argument("--schema-dir", action="append", default=[], help="directory to look up names in (repeatable)")
    p.add_argument("--fail-on-validation-error", action="store_true", help="Treat schema violations as a hard failure")
    p.add_argument("--base-url", help="Evaluate through a running provider server instead of in-process")
    p.add_argument("--config", help="Path to config.yaml")
    p.add_argument("--report-dir", help="Write JSON and JUnit reports to this directory")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = merge_config(load_config(args.config))
    configure_logging("DEBUG" if args.verbose else cfg["log_level"])

    search_dirs = args.schema_dir or [os.path.join(os.getcwd(), "schemas")]
    try:
        schema_text = load_document_text(args.schema, search_dirs)
        data_text = load_document_text(args.data, search_dirs)
    except FileNotFoundError as e:
        print_fail(str(e))
        return EXIT_FAILURE

    if args.base_url:
        logger.debug("evaluating through %s", args.base_url)
        try:
            entry = evaluate_remote(args.base_url, cfg["defaults"]["timeout"], schema_text, data_text,
                                    args.fail_on_validation_error)
        except requests.RequestException as e:
            print_fail(f"Request to {args.base_url} failed: {e}")
            return EXIT_FAILURE
    else:
        entry = evaluate_local(schema_text, data_text, args.fail_on_validation_error)
    entry = {"schema": args.schema, "data": args.data, **entry}

    code = exit_code_for(entry)
    if code == EXIT_VALID:
        print_ok(f"[OK] {args.data} is valid against {args.schema}")
    elif code == EXIT_INVALID:
        print_fail(f"[INVALID] {args.data} does not match {args.schema}")
        print(entry["state"]["validation_errors"])
    else:
        for d in entry["diagnostics"]:
            print_fail(f"[{d['summary']}] {d['detail']}")

    if args.report_dir:
        json_fn, junit_fn = write_reports(args.report_dir, entry)
        print(f"Report written to {json_fn}")
        print(f"JUnit report written to {junit_fn}")
    return code


if __name__ == "__main__":
    sys.exit(main())
