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

"""Reader for BikeML, a tiny configuration language of nested
dictionaries and lists."""

from bikeml.errors import __all__ as __all_errors__
from bikeml.errors import *  # noqa: F401,F403
from bikeml.tokenizer import Token, TokenKind, Tokenizer
from bikeml.parser import Parser, load, loads

__version__ = "1.0.0"

__all__ = [
    "load",
    "loads",
    "Parser",
    "Token",
    "TokenKind",
    "Tokenizer",
] + __all_errors__
