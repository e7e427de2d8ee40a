# Importing the package registers the built-in sources
from . import demo, randomuser  # noqa: F401
