from rest_framework.request import Request


def client_ip(request: Request) -> str:
    """Best-effort client address behind Vercel/Cloudflare/nginx style proxies."""
    meta = request.META
    forwarded_for = meta.get("HTTP_X_FORWARDED_FOR")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    for header in ("HTTP_CF_CONNECTING_IP", "HTTP_X_REAL_IP", "REMOTE_ADDR"):
        value = meta.get(header)
        if value:
            return value
    return "unknown"
