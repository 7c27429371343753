# Copyright 2026 The BikeML Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import argparse
import logging
import sys

import bikeml


logger = logging.getLogger("bikeml")

description = """\n
Checks that BikeML documents are well formed.
"""


def parse_options(args):
    parser = argparse.ArgumentParser(prog="bikeml", description=description)
    parser.add_argument(
        "--version", action="version", version="bikeml %s" % (bikeml.__version__)
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parser progress."
    )
    parser.add_argument(
        "files", metavar="FILE", nargs="+", help="BikeML document to check."
    )
    options = parser.parse_args(args)
    return options


def main(args=None):
    opt = parse_options(args)
    logging.basicConfig(
        level=logging.DEBUG if opt.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    failed = 0
    for path in opt.files:
        try:
            bikeml.load(path)
        except (bikeml.BikeMLError, OSError) as e:
            logger.error("%s: %s", path, e)
            failed += 1
        else:
            logger.info("%s: ok", path)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
