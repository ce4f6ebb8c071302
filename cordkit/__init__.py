from .version import VERSION
from .env import Env, env


__version__ = VERSION

__all__ = (
    'Env',
    'VERSION',
    'env',
)
