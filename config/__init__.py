"""Configuration package for passpick.

All values live in `config.settings`; they are re-exported here so that
`from config import SECRET_EXTENSION` works as well.
"""

from .settings import *  # noqa: F401,F403
from .settings import __all__  # noqa: F401
