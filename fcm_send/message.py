import time

TITLE = "Title FCM Notification"
BODY_PREFIX = "Notification from FCM "

ANDROID_CLICK_ACTION = "android.intent.action.MAIN"
APNS_BADGE = 1
APNS_PRIORITY = "10"


def build_message(device_token, timestamp_ms=None):
    """Common notification payload addressed to one device."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return {
        "message": {
            "token": device_token,
            "data": {
                "title": TITLE,
                "body": BODY_PREFIX + str(timestamp_ms),
            },
        }
    }


def build_override_message(device_token, timestamp_ms=None):
    """Common payload plus the iOS badge and Android click action overrides."""
    fcm_message = build_message(device_token, timestamp_ms)
    fcm_message["message"]["android"] = {
        "notification": {
            "click_action": ANDROID_CLICK_ACTION,
        }
    }
    fcm_message["message"]["apns"] = {
        "payload": {
            "aps": {
                "badge": APNS_BADGE,
            }
        },
        "headers": {
            "apns-priority": APNS_PRIORITY,
        },
    }
    return fcm_message
