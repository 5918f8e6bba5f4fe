from decimal import Decimal
from enum import Enum
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from paymentsessions.domain.ids import CouponId
from paymentsessions.domain.ids import Currency
from paymentsessions.domain.ids import CustomerId
from paymentsessions.domain.ids import PriceId


class PaymentMethodType(str, Enum):
    ACSS_DEBIT = "acss_debit"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BOLETO = "boleto"
    CARD = "card"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    KLARNA = "klarna"
    KONBINI = "konbini"
    OXXO = "oxxo"
    P24 = "p24"
    PAYNOW = "paynow"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    US_BANK_ACCOUNT = "us_bank_account"
    WECHAT_PAY = "wechat_pay"


class CheckoutSessionMode(str, Enum):
    PAYMENT = "payment"
    SETUP = "setup"
    SUBSCRIPTION = "subscription"


class CheckoutSessionSubmitType(str, Enum):
    AUTO = "auto"
    BOOK = "book"
    DONATE = "donate"
    PAY = "pay"


class BillingAddressCollection(str, Enum):
    AUTO = "auto"
    REQUIRED = "required"


class CheckoutSessionLocale(str, Enum):
    """IETF language tags Checkout can be displayed in, `auto` uses the browser's locale"""

    AUTO = "auto"
    BG = "bg"
    CS = "cs"
    DA = "da"
    DE = "de"
    EL = "el"
    EN = "en"
    EN_GB = "en-GB"
    ES = "es"
    ES_419 = "es-419"
    ET = "et"
    FI = "fi"
    FIL = "fil"
    FR = "fr"
    FR_CA = "fr-CA"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IT = "it"
    JA = "ja"
    KO = "ko"
    LT = "lt"
    LV = "lv"
    MS = "ms"
    MT = "mt"
    NB = "nb"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    PT_BR = "pt-BR"
    RO = "ro"
    RU = "ru"
    SK = "sk"
    SL = "sl"
    SV = "sv"
    TH = "th"
    TR = "tr"
    VI = "vi"
    ZH = "zh"
    ZH_HK = "zh-HK"
    ZH_TW = "zh-TW"


class _Params(BaseModel):
    # Field declaration order is the wire order
    model_config = ConfigDict(frozen=True, extra="forbid")


class AutomaticTax(_Params):
    enabled: bool


class Discount(_Params):
    coupon: Optional[CouponId] = None


class SubscriptionData(_Params):
    """
    A subset of parameters passed to subscription creation
    for Checkout Sessions in subscription mode.
    """

    application_fee_percent: Optional[Decimal] = Field(
        default=None,
        description="Percentage of the subscription invoice subtotal transferred to the application owner's account",
    )
    default_tax_rates: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    trial_end: Optional[int] = Field(
        default=None,
        description="Unix timestamp for the end of the trial period",
    )
    trial_period_days: Optional[int] = Field(
        default=None,
        description="Number of trial period days before the customer is charged for the first time",
    )


class LineItem(_Params):
    """
    When `price` is not set, `amount` and `currency` price the item.
    Which combination is valid is decided by the payment API.
    """

    amount: Optional[int] = Field(
        default=None,
        description="Amount to be collected per unit, in the currency's minor unit",
    )
    currency: Optional[Currency] = None
    name: Optional[str] = None
    quantity: int = Field(ge=0)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    price: Optional[PriceId] = None


class CreateCheckoutSessionParams(_Params):
    cancel_url: str = Field(
        description="URL the customer is directed to if they cancel payment and return to the website",
    )
    success_url: str = Field(
        description="URL the customer is directed to after the payment or subscription creation succeeded",
    )
    payment_method_types: List[PaymentMethodType]
    client_reference_id: Optional[str] = Field(
        default=None,
        description="Reference for reconciling the session with internal systems, e.g. a cart id",
    )
    customer: Optional[CustomerId] = None
    customer_email: Optional[str] = Field(
        default=None,
        description="Prefills the email of the Customer object created by Checkout",
    )
    billing_address_collection: Optional[BillingAddressCollection] = None
    line_items: Optional[List[LineItem]] = None
    locale: Optional[CheckoutSessionLocale] = None
    mode: Optional[CheckoutSessionMode] = None
    discounts: Optional[List[Discount]] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None
    subscription_data: Optional[SubscriptionData] = None
    automatic_tax: Optional[AutomaticTax] = None
    # Sub-parameters for PaymentIntent and SetupIntent creation are passed through as given
    payment_intent_data: Optional[Dict[str, Any]] = None
    setup_intent_data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None


class CheckoutSession(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    object: Optional[str] = None
    url: Optional[str] = None
    # Kept as strings so values added on the remote side still decode
    mode: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    locale: Optional[str] = None
    submit_type: Optional[str] = None
    payment_method_types: Optional[List[str]] = None
    customer: Optional[str] = None
    customer_email: Optional[str] = None
    client_reference_id: Optional[str] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    amount_subtotal: Optional[int] = None
    amount_total: Optional[int] = None
    currency: Optional[str] = None
    subscription: Optional[str] = None
    payment_intent: Optional[str] = None
    livemode: Optional[bool] = None
    expires_at: Optional[int] = None
    metadata: Optional[Dict[str, str]] = None
