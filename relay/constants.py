# Identidade das mensagens enviadas ao Discord (o username define o webhook de destino)
GCP_USERNAME = "GCP Monitoring"
GCP_AVATAR_URL = "https://www.gstatic.com/images/branding/product/2x/stackdriver_64dp.png"
GCP_FOOTER = "GCP Monitoring Alert"

ADAPTY_USERNAME = "Adapty"
ADAPTY_AVATAR_URL = "https://avatars.githubusercontent.com/u/55606573"
ADAPTY_FOOTER = "Adapty Subscription Management"
ADAPTY_TITLE_PREFIX = "Adapty"

# Cores (RGB decimal) dos incidentes do GCP
INCIDENT_OPEN_COLOR = 16007725    # #F5222D
INCIDENT_CLOSED_COLOR = 1619771   # #18B73B

PLACEHOLDER = "-"
NO_SUMMARY = "No summary available."

# Paleta do Adapty
GREEN = 3066993
BLUE = 3447003
PURPLE = 10181046
YELLOW = 16776960
ORANGE = 15105570
RED = 15158332
GRAY = 7506394

DEFAULT_EVENT_COLOR = GRAY

EVENT_COLORS = {
    "subscription_started": GREEN,
    "subscription_renewed": BLUE,
    "subscription_renewal_cancelled": ORANGE,
    "subscription_renewal_reactivated": GREEN,
    "subscription_expired": YELLOW,
    "subscription_paused": ORANGE,
    "subscription_deferred": BLUE,
    "subscription_refunded": RED,
    "subscription_canceled": RED,
    "non_subscription_purchase": GREEN,
    "non_subscription_purchase_refunded": RED,
    "trial_started": PURPLE,
    "trial_converted": GREEN,
    "trial_renewal_cancelled": ORANGE,
    "trial_renewal_reactivated": PURPLE,
    "trial_expired": RED,
    "entered_grace_period": ORANGE,
    "billing_issue_detected": RED,
    "access_level_updated": BLUE,
    "transaction_completed": GREEN,
    "transaction_restored": BLUE,
    "transaction_refunded": RED,
}

EVENT_LABELS = {
    "subscription_started": "Subscription Started",
    "subscription_renewed": "Subscription Renewed",
    "subscription_renewal_cancelled": "Subscription Renewal Cancelled",
    "subscription_renewal_reactivated": "Subscription Renewal Reactivated",
    "subscription_expired": "Subscription Expired",
    "subscription_paused": "Subscription Paused",
    "subscription_deferred": "Subscription Deferred",
    "subscription_refunded": "Subscription Refunded",
    "subscription_canceled": "Subscription Canceled",
    "non_subscription_purchase": "One-time Purchase",
    "non_subscription_purchase_refunded": "One-time Purchase Refunded",
    "trial_started": "Trial Started",
    "trial_converted": "Trial Converted",
    "trial_renewal_cancelled": "Trial Renewal Cancelled",
    "trial_renewal_reactivated": "Trial Renewal Reactivated",
    "trial_expired": "Trial Expired",
    "entered_grace_period": "Entered Grace Period",
    "billing_issue_detected": "Billing Issue Detected",
    "access_level_updated": "Access Level Updated",
    "transaction_completed": "Transaction Completed",
    "transaction_restored": "Transaction Restored",
    "transaction_refunded": "Transaction Refunded",
}

# Descrições por produto: "{product}"
PRODUCT_DESCRIPTIONS = {
    "subscription_started": "A new subscription to **{product}** has been started.",
    "subscription_renewed": "The subscription to **{product}** has been renewed.",
    "subscription_renewal_cancelled": "Auto-renewal of **{product}** has been turned off.",
    "subscription_renewal_reactivated": "Auto-renewal of **{product}** has been turned back on.",
    "subscription_expired": "The subscription to **{product}** has expired.",
    "subscription_paused": "The subscription to **{product}** has been paused.",
    "subscription_deferred": "The renewal of **{product}** has been deferred.",
    "subscription_refunded": "The subscription to **{product}** has been refunded.",
    "subscription_canceled": "The subscription to **{product}** has been canceled.",
    "non_subscription_purchase": "**{product}** has been purchased.",
    "non_subscription_purchase_refunded": "The purchase of **{product}** has been refunded.",
    "trial_started": "A trial of **{product}** has started.",
    "trial_converted": "The trial of **{product}** has been converted to a paid subscription.",
    "trial_renewal_cancelled": "Auto-renewal after the trial of **{product}** has been turned off.",
    "trial_renewal_reactivated": "Auto-renewal after the trial of **{product}** has been turned back on.",
    "trial_expired": "The trial of **{product}** has expired.",
    "entered_grace_period": "The subscription to **{product}** has entered the grace period.",
    "billing_issue_detected": "A billing issue was detected for **{product}**.",
    "transaction_completed": "A transaction for **{product}** has been completed.",
    "transaction_restored": "A transaction for **{product}** has been restored.",
    "transaction_refunded": "A transaction for **{product}** has been refunded.",
}

# Descrições por valor (somente eventos com receita): "{price}"
PRICE_DESCRIPTIONS = {
    "subscription_started": "A new subscription has been started for {price}.",
    "subscription_renewed": "A subscription has been renewed for {price}.",
    "subscription_refunded": "A subscription payment of {price} has been refunded.",
    "non_subscription_purchase": "A one-time purchase of {price} has been made.",
    "non_subscription_purchase_refunded": "A one-time purchase of {price} has been refunded.",
    "trial_converted": "A trial has been converted to a paid subscription for {price}.",
    "transaction_completed": "A transaction of {price} has been completed.",
    "transaction_refunded": "A transaction of {price} has been refunded.",
}

ACCESS_LEVEL_DESCRIPTION = "Access level has been updated to **{access_level}**."

EVENT_DESCRIPTIONS = {
    "subscription_started": "A new subscription has been started.",
    "subscription_renewed": "A subscription has been successfully renewed.",
    "subscription_renewal_cancelled": "A subscription auto-renewal has been turned off.",
    "subscription_renewal_reactivated": "A subscription auto-renewal has been turned back on.",
    "subscription_expired": "A subscription has expired.",
    "subscription_paused": "A subscription has been paused.",
    "subscription_deferred": "A subscription renewal has been deferred.",
    "subscription_refunded": "A subscription has been refunded.",
    "subscription_canceled": "A subscription has been canceled.",
    "non_subscription_purchase": "A one-time purchase has been made.",
    "non_subscription_purchase_refunded": "A one-time purchase has been refunded.",
    "trial_started": "A new trial period has started.",
    "trial_converted": "A trial has been converted to a paid subscription.",
    "trial_renewal_cancelled": "A trial auto-renewal has been turned off.",
    "trial_renewal_reactivated": "A trial auto-renewal has been turned back on.",
    "trial_expired": "A trial period has expired.",
    "entered_grace_period": "A subscription has entered the grace period.",
    "billing_issue_detected": "A billing issue has been detected.",
    "access_level_updated": "The access level of a profile has been updated.",
    "transaction_completed": "A transaction has been completed successfully.",
    "transaction_restored": "A transaction has been restored.",
    "transaction_refunded": "A transaction has been refunded.",
}

# Verificações do webhook
ADAPTY_CHECK_KEY = "adapty_check"
ADAPTY_CHECK_RESPONSE_KEY = "adapty_check_response"
MOUNT_EVENT = "isMount"
MOUNT_RESPONSE = {"status": "ok", "message": "Webhook verification successful"}
