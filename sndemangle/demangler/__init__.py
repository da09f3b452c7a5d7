from .errors import DemanglingError
from .main import decode, demangle
from .ScalaNativeDemangler import ScalaNativeDemangler
