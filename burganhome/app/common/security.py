CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-eval' 'unsafe-inline' *.googleapis.com *.gstatic.com "
    "*.google-analytics.com *.googletagmanager.com; "
    "style-src 'self' 'unsafe-inline' *.googleapis.com; "
    "img-src 'self' data: https: blob:; "
    "font-src 'self' data: *.gstatic.com; "
    "connect-src 'self' *.google-analytics.com *.analytics.google.com *.googletagmanager.com *.supabase.co; "
    "frame-src 'self' *.google.com;"
)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Permissions-Policy": "camera=(), microphone=(), geolocation=(), interest-cohort=()",
}


def apply_security_headers(response):
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response
