import requests
from requests.exceptions import RequestException
from ceobrief.errors import DeliveryError

API = "https://api.telegram.org"
MAX_TEXT = 4096  # Telegram sendMessage limit

def _redact(s: str, token: str) -> str:
    return s.replace(token, "REDACTED") if token else s

def send_message(token: str, chat_id: str, text: str, timeout: float = 10,
                 base_url: str = API) -> dict:
    """POST text to the bot's chat. Raises DeliveryError unless Telegram answers ok=true."""
    url = f"{base_url}/bot{token}/sendMessage"
    payload = {
        "chat_id": chat_id,
        "text": text[:MAX_TEXT],
        "parse_mode": "Markdown",
        "disable_web_page_preview": False,
    }
    try:
        r = requests.post(url, json=payload, timeout=timeout)
    except RequestException as e:
        raise DeliveryError(f"Telegram send failed: {_redact(str(e), token)}") from None
    try:
        data = r.json()
    except ValueError:
        body = _redact(r.text[:200], token)
        raise DeliveryError(f"Telegram send failed: HTTP {r.status_code} {body}") from None
    if not isinstance(data, dict) or not data.get("ok"):
        raise DeliveryError(f"Telegram send failed: {_redact(str(data), token)}")
    return data
