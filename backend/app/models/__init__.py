from .affiliates import Affiliate, ReferredCustomer
from .withdrawals import WithdrawalRequest
from .commission_settings import CommissionSettings
