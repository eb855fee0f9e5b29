#!/usr/bin/env python3

import argparse
import logging
import os

from forensic.loader import build_database, write_profiles_tsv

logging.basicConfig(level=logging.DEBUG)

parser = argparse.ArgumentParser()
parser.add_argument('input_file', type=str, help="File with unknown sequences and known DNA profiles")
parser.add_argument('--output-file', '-o', type=str, default=None,
                    help="Write the profiles left after the analysis to this TSV file")
parser.add_argument('--no-cleanup', action='store_true',
                    help="Keep profiles that are not of interest in the database")
args = parser.parse_args()

input_file = os.path.abspath(args.input_file)
logging.info(f'Input File: {input_file!r}')

if args.output_file is not None and os.path.exists(args.output_file):
    logging.error("Output file exists. Refusing to overwrite")
    exit(1)

try:
    db = build_database(input_file)
except ValueError as e:
    logging.fatal(f"Could not read {input_file!r}: {e}")
    exit(1)

db.flag_of_interest()
logging.info(f"Profiles of interest: {db.count_by_interest(True)}, "
             f"not of interest: {db.count_by_interest(False)}")

if not args.no_cleanup:
    removed = db.cleanup()
    logging.info(f"Removed {len(removed)} profiles: {removed}")

logging.info(f"Remaining people: {db.names()}")

if args.output_file is not None:
    with open(args.output_file, 'w') as out_fh:
        write_profiles_tsv(db, out_fh)
    logging.info(f"Wrote profiles to {args.output_file!r}")
