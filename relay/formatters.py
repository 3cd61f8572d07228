from datetime import datetime, timezone

from .constants import (
    ACCESS_LEVEL_DESCRIPTION,
    ADAPTY_AVATAR_URL,
    ADAPTY_FOOTER,
    ADAPTY_TITLE_PREFIX,
    ADAPTY_USERNAME,
    DEFAULT_EVENT_COLOR,
    EVENT_COLORS,
    EVENT_DESCRIPTIONS,
    GCP_AVATAR_URL,
    GCP_FOOTER,
    GCP_USERNAME,
    INCIDENT_CLOSED_COLOR,
    INCIDENT_OPEN_COLOR,
    NO_SUMMARY,
    PLACEHOLDER,
    PRICE_DESCRIPTIONS,
    PRODUCT_DESCRIPTIONS,
)
from .utils import (
    _is_meaningful,
    format_amount,
    format_date,
    format_duration,
    format_event_type,
    format_rfc3339,
    safe_rfc3339,
    yes_no,
)


def _field(name, value, inline=True):
    return {"name": name, "value": str(value), "inline": inline}


def _render_timestamp(now=None):
    return format_rfc3339(now or datetime.now(timezone.utc))


def _or_placeholder(value, label, debug_mode=False):
    if _is_meaningful(value):
        return value
    if debug_mode:
        print(f"[WARN] Empty {label} received")
    return PLACEHOLDER


def format_incident(notification, now=None, debug_mode=False):
    incident = notification.incident

    project_id = _or_placeholder(incident.project_id, "ProjectID", debug_mode)
    policy_name = _or_placeholder(incident.policy_name, "PolicyName", debug_mode)
    condition_name = _or_placeholder(incident.condition_name, "ConditionName", debug_mode)

    fields = [
        _field("Project ID", project_id),
        _field("Incident ID", _or_placeholder(incident.incident_id, "IncidentID", debug_mode)),
        _field("Condition", condition_name),
    ]

    started_at = incident.started_at or 0
    ended_at = incident.ended_at or 0
    started = safe_rfc3339(started_at) if started_at > 0 else None
    if started:
        fields.append(_field("Started at", started))
        ended = safe_rfc3339(ended_at) if ended_at > 0 else None
        if ended:
            duration = format_duration(started_at, ended_at)
            fields.append(_field("Ended at", f"{ended} ({duration})"))

    if incident.state == "open":
        color = INCIDENT_OPEN_COLOR
        title = f'"{project_id}" - Incident opened for "{policy_name}"'
    else:
        color = INCIDENT_CLOSED_COLOR
        title = f'"{project_id}" - Incident closed for "{policy_name}"'

    summary = incident.summary
    if not _is_meaningful(summary):
        summary = NO_SUMMARY
        if debug_mode:
            print("[WARN] Empty Summary received")

    embed = {
        "title": title,
        "description": summary,
        "color": color,
        "fields": fields,
        "footer": {"text": GCP_FOOTER},
        "timestamp": _render_timestamp(now),
    }
    if incident.url:
        embed["url"] = incident.url

    return {
        "username": GCP_USERNAME,
        "avatar_url": GCP_AVATAR_URL,
        "embeds": [embed],
    }


def _positive_amount(value):
    try:
        return value is not None and not isinstance(value, bool) and float(value) > 0
    except (TypeError, ValueError):
        return False


def format_revenue(event):
    if not _positive_amount(event.price):
        return None
    revenue = format_amount(event.price, event.currency)
    if _positive_amount(event.proceeds):
        revenue += f" (net: {format_amount(event.proceeds, event.proceeds_currency)})"
    return revenue


def format_environment(event):
    if event.is_sandbox is not None:
        return "Sandbox" if event.is_sandbox else "Production"
    if _is_meaningful(event.environment):
        return event.environment
    return None


def build_description(event):
    event_type = event.event_type or ""

    if _is_meaningful(event.vendor_product_id) and event_type in PRODUCT_DESCRIPTIONS:
        return PRODUCT_DESCRIPTIONS[event_type].format(product=event.vendor_product_id)

    if _positive_amount(event.price) and event_type in PRICE_DESCRIPTIONS:
        return PRICE_DESCRIPTIONS[event_type].format(price=format_amount(event.price, event.currency))

    if event_type == "access_level_updated" and _is_meaningful(event.access_level_id):
        return ACCESS_LEVEL_DESCRIPTION.format(access_level=event.access_level_id)

    if event_type in EVENT_DESCRIPTIONS:
        return EVENT_DESCRIPTIONS[event_type]

    return f"Received event: {event_type}"


def build_subscription_fields(event):
    fields = []

    def add(name, value):
        if _is_meaningful(value):
            fields.append(_field(name, value))

    add("User", event.customer_user_id)
    add("Email", event.email)
    add("Profile ID", event.profile_id)
    add("Transaction ID", event.transaction_id)
    add("Product", event.vendor_product_id)
    add("Base Plan", event.base_plan_id)
    add("Store", event.store)
    add("Status", event.status)
    add("Environment", format_environment(event))
    add("Revenue", format_revenue(event))
    if event.profile_has_access_level is not None:
        add("Has Access", yes_no(event.profile_has_access_level))
    if event.will_renew is not None:
        add("Will Renew", yes_no(event.will_renew))
    if event.is_restored:
        add("Restored", "Yes")

    # Datas ISO-8601 -> formato legível
    add("Purchase Date", format_date(event.purchase_date))
    add("Expires At", format_date(event.expires_at))
    add("Paused At", format_date(event.pause_start_date))
    add("Auto Resume", format_date(event.auto_resume_date))
    add("Deferred Until", format_date(event.deferred_expiration_date))

    add("Cancellation Reason", event.cancellation_reason)
    add("Billing Error", event.billing_error)
    add("Paywall", event.paywall_name)
    add("A/B Test", event.ab_test_name)
    add("Access Level", event.access_level_id)
    return fields


def format_subscription_event(event, now=None, debug_mode=False):
    color = EVENT_COLORS.get(event.event_type, DEFAULT_EVENT_COLOR)
    if debug_mode and event.event_type not in EVENT_COLORS:
        print(f"[DEBUG] Unknown Adapty event type: {event.event_type}")

    return {
        "username": ADAPTY_USERNAME,
        "avatar_url": ADAPTY_AVATAR_URL,
        "embeds": [
            {
                "title": f"{ADAPTY_TITLE_PREFIX}: {format_event_type(event.event_type)}",
                "description": build_description(event),
                "color": color,
                "fields": build_subscription_fields(event),
                "footer": {"text": ADAPTY_FOOTER},
                "timestamp": _render_timestamp(now),
            }
        ],
    }
