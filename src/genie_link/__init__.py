from .GenieLink import GenieLink
from .custom_types import GenieCommand, GenieObject, GaugeEventRecord
from .exceptions import LinkError, LinkInitError, LinkIOError

__all__ = [
  'GenieLink',
  'GenieCommand',
  'GenieObject',
  'GaugeEventRecord',
  'LinkError',
  'LinkInitError',
  'LinkIOError',
]
