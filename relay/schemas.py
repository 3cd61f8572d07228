from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .utils import pick_first_nonempty, safe_rfc3339


# --- GCP Monitoring ---

class Incident(BaseModel):
    project_id: Optional[str] = Field(
        default="", validation_alias=AliasChoices("scoping_project_id", "project_id")
    )
    incident_id: Optional[str] = ""
    resource_id: Optional[str] = ""
    resource_name: Optional[str] = ""
    state: Optional[str] = ""
    started_at: Optional[int] = 0
    ended_at: Optional[int] = 0
    policy_name: Optional[str] = ""
    condition_name: Optional[str] = ""
    url: Optional[str] = ""
    summary: Optional[str] = ""


class MonitoringNotification(BaseModel):
    incident: Optional[Incident] = None
    version: Optional[str] = ""


# --- Adapty (formato tipado) ---

# Chaves não declaradas são preservadas: o evento canônico lê o payload inteiro
class AdaptyModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class AdaptySubscription(AdaptyModel):
    id: Optional[str] = None
    status: Optional[str] = None
    store: Optional[str] = None
    product_id: Optional[str] = None
    expires_at: Optional[int] = None
    canceled_at: Optional[int] = None
    started_at: Optional[int] = None
    renewed_at: Optional[int] = None
    is_sandbox: Optional[bool] = None
    will_renew: Optional[bool] = None


class AdaptyTransaction(AdaptyModel):
    id: Optional[str] = None
    offer_id: Optional[str] = None
    product_id: Optional[str] = None
    purchased_at: Optional[int] = None
    is_restored: Optional[bool] = None
    value: Optional[float] = None
    currency: Optional[str] = None
    store: Optional[str] = None
    is_sandbox: Optional[bool] = None


class AdaptyProduct(AdaptyModel):
    vendor_product_id: Optional[str] = None
    base_plan_id: Optional[str] = None


class AdaptyEventData(AdaptyModel):
    profile_id: Optional[str] = None
    customer_user_id: Optional[str] = None
    email: Optional[str] = None
    event: Optional[str] = None
    event_type: Optional[str] = None
    subscription: Optional[AdaptySubscription] = None
    transaction: Optional[AdaptyTransaction] = None
    new_status: Optional[str] = None
    previous_status: Optional[str] = None
    product: Optional[AdaptyProduct] = None


class EventProperties(AdaptyModel):
    customer_user_id: Optional[str] = None
    email: Optional[str] = None
    profile_id: Optional[str] = None
    store: Optional[str] = None
    environment: Optional[str] = None
    is_sandbox: Optional[bool] = None
    currency: Optional[str] = None
    price_usd: Optional[float] = None
    price_local: Optional[float] = None
    proceeds_usd: Optional[float] = None
    proceeds_local: Optional[float] = None
    vendor_product_id: Optional[str] = None
    base_plan_id: Optional[str] = None
    transaction_id: Optional[str] = None
    original_transaction_id: Optional[str] = None
    purchase_date: Optional[str] = None
    original_purchase_date: Optional[str] = None
    subscription_expires_at: Optional[str] = None
    expires_at: Optional[str] = None
    pause_start_date: Optional[str] = None
    auto_resume_date: Optional[str] = None
    deferred_expiration_date: Optional[str] = None
    cancellation_reason: Optional[str] = None
    billing_error: Optional[str] = None
    paywall_name: Optional[str] = None
    ab_test_name: Optional[str] = None
    access_level_id: Optional[str] = None
    profile_has_access_level: Optional[bool] = None
    will_renew: Optional[bool] = None
    is_restored: Optional[bool] = None


class AdaptyWebhook(AdaptyModel):
    event: Optional[str] = None
    event_type: Optional[str] = None
    timestamp: Optional[int] = None
    profile_id: Optional[str] = None
    customer_user_id: Optional[str] = None
    email: Optional[str] = None
    event_datetime: Optional[str] = None
    transaction_id: Optional[str] = None
    vendor_product_id: Optional[str] = None
    access_level_id: Optional[str] = None
    profile_has_access_level: Optional[bool] = None
    event_properties: Optional[EventProperties] = None
    data: Optional[AdaptyEventData] = None


# --- Representação canônica (união dos formatos tipado e mapa) ---

def _section(source, key) -> Dict[str, Any]:
    value = source.get(key) if isinstance(source, dict) else None
    return value if isinstance(value, dict) else {}


def _epoch_to_iso(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return None
    if seconds <= 0:
        return None
    return safe_rfc3339(seconds)


def _first_string(*candidates):
    for c in candidates:
        if isinstance(c, str) and c.strip():
            return c
    return None


def _first_flag(*candidates):
    for c in candidates:
        if isinstance(c, bool):
            return c
    return None


@dataclass
class SubscriptionEvent:
    event_type: Optional[str] = None
    customer_user_id: Optional[str] = None
    email: Optional[str] = None
    profile_id: Optional[str] = None
    transaction_id: Optional[str] = None
    vendor_product_id: Optional[str] = None
    base_plan_id: Optional[str] = None
    store: Optional[str] = None
    status: Optional[str] = None
    is_sandbox: Optional[bool] = None
    environment: Optional[str] = None
    price: Any = None
    currency: Optional[str] = None
    proceeds: Any = None
    proceeds_currency: Optional[str] = None
    profile_has_access_level: Optional[bool] = None
    will_renew: Optional[bool] = None
    is_restored: Optional[bool] = None
    purchase_date: Optional[str] = None
    expires_at: Optional[str] = None
    pause_start_date: Optional[str] = None
    auto_resume_date: Optional[str] = None
    deferred_expiration_date: Optional[str] = None
    cancellation_reason: Optional[str] = None
    billing_error: Optional[str] = None
    paywall_name: Optional[str] = None
    ab_test_name: Optional[str] = None
    access_level_id: Optional[str] = None

    @classmethod
    def from_webhook(cls, webhook: AdaptyWebhook) -> "SubscriptionEvent":
        return cls.from_mapping(webhook.model_dump(exclude_none=True))

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any]) -> "SubscriptionEvent":
        props = _section(raw, "event_properties")
        data = _section(raw, "data")
        sub = _section(data, "subscription")
        txn = _section(data, "transaction")
        product = _section(data, "product")

        # Preço: moeda local > USD > valor da transação (formato antigo)
        if props.get("price_local") is not None:
            price, currency = props.get("price_local"), props.get("currency")
        elif props.get("price_usd") is not None:
            price, currency = props.get("price_usd"), "USD"
        else:
            price, currency = txn.get("value"), txn.get("currency")

        if props.get("proceeds_local") is not None:
            proceeds, proceeds_currency = props.get("proceeds_local"), props.get("currency")
        elif props.get("proceeds_usd") is not None:
            proceeds, proceeds_currency = props.get("proceeds_usd"), "USD"
        else:
            proceeds, proceeds_currency = None, None

        return cls(
            event_type=_first_string(
                raw.get("event_type"), raw.get("event"), data.get("event_type"), data.get("event")
            ),
            customer_user_id=pick_first_nonempty(
                raw.get("customer_user_id"), props.get("customer_user_id"), data.get("customer_user_id")
            ),
            email=pick_first_nonempty(raw.get("email"), props.get("email"), data.get("email")),
            profile_id=pick_first_nonempty(
                raw.get("profile_id"), props.get("profile_id"), data.get("profile_id")
            ),
            transaction_id=pick_first_nonempty(
                props.get("transaction_id"), txn.get("id"), raw.get("transaction_id")
            ),
            vendor_product_id=pick_first_nonempty(
                props.get("vendor_product_id"),
                product.get("vendor_product_id"),
                sub.get("product_id"),
                txn.get("product_id"),
                raw.get("vendor_product_id"),
            ),
            base_plan_id=pick_first_nonempty(props.get("base_plan_id"), product.get("base_plan_id")),
            store=pick_first_nonempty(props.get("store"), sub.get("store"), txn.get("store")),
            status=pick_first_nonempty(sub.get("status"), data.get("new_status")),
            is_sandbox=_first_flag(props.get("is_sandbox"), sub.get("is_sandbox"), txn.get("is_sandbox")),
            environment=pick_first_nonempty(props.get("environment")),
            price=price,
            currency=currency,
            proceeds=proceeds,
            proceeds_currency=proceeds_currency,
            profile_has_access_level=_first_flag(
                props.get("profile_has_access_level"), raw.get("profile_has_access_level")
            ),
            will_renew=_first_flag(props.get("will_renew"), sub.get("will_renew")),
            is_restored=_first_flag(props.get("is_restored"), txn.get("is_restored")),
            purchase_date=pick_first_nonempty(
                props.get("purchase_date"),
                _epoch_to_iso(txn.get("purchased_at")),
                _epoch_to_iso(sub.get("started_at")),
            ),
            expires_at=pick_first_nonempty(
                props.get("subscription_expires_at"),
                props.get("expires_at"),
                _epoch_to_iso(sub.get("expires_at")),
            ),
            pause_start_date=pick_first_nonempty(props.get("pause_start_date")),
            auto_resume_date=pick_first_nonempty(props.get("auto_resume_date")),
            deferred_expiration_date=pick_first_nonempty(props.get("deferred_expiration_date")),
            cancellation_reason=pick_first_nonempty(props.get("cancellation_reason")),
            billing_error=pick_first_nonempty(props.get("billing_error")),
            paywall_name=pick_first_nonempty(props.get("paywall_name")),
            ab_test_name=pick_first_nonempty(props.get("ab_test_name")),
            access_level_id=pick_first_nonempty(props.get("access_level_id"), raw.get("access_level_id")),
        )
