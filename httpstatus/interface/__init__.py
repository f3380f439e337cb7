from .struct import Base as Base
from .struct import Record as Record
