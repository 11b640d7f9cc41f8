from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .service import (
    CurrencyConverter as CurrencyConverter,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
