from .constant import status as status
from .errors import HTTPStatusError as HTTPStatusError
from .errors import UnknownStatusError as UnknownStatusError
from .registry import STATUS_ENTRIES as STATUS_ENTRIES
from .registry import StatusClass as StatusClass
from .registry import StatusEntry as StatusEntry
from .registry import aliases as aliases
from .registry import code as code
from .registry import entries as entries
from .registry import get_status_text as get_status_text
from .registry import is_client_error as is_client_error
from .registry import is_error as is_error
from .registry import is_informational as is_informational
from .registry import is_redirect as is_redirect
from .registry import is_server_error as is_server_error
from .registry import is_status as is_status
from .registry import is_success as is_success
from .registry import lookup_by_code as lookup_by_code
from .registry import lookup_by_symbolic_name as lookup_by_symbolic_name
from .registry import lookup_entry as lookup_entry
from .registry import phrase as phrase
from .registry import status_class as status_class

__version__ = "0.1.0"
