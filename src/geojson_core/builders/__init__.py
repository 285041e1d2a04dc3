# Redundant aliasing to suppress Ruff unused-import messages.
from .polygon import BuilderState as BuilderState
from .polygon import Built as Built
from .polygon import Empty as Empty
from .polygon import Options as Options
from .polygon import PolygonBuilder as PolygonBuilder
