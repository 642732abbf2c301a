from .maybe import Maybe, Present, ABSENT, from_nullable
from .pending import Pending, defer
from .errors import ContractViolation, ProviderReturnedNone
from .logger import ConsoleLogger
from .config import Settings, configure, get_settings, get_logger, reset as reset_settings
