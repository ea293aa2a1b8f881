from enum import Enum

# Stored as strings (native enums disabled for easier evolution).
# Values match what the portals display.


class AffiliatePlanEnum(str, Enum):
    BASIC = "Basic"
    PREMIUM = "Premium"


class WithdrawalStatusEnum(str, Enum):
    # Pending is only ever set on creation.
    PENDING = "Pending"
    APPROVED = "Approved"
    DECLINED = "Declined"


class OrderTypeEnum(str, Enum):
    RECURRING = "recurring"
    ONE_TIME = "one-time"
