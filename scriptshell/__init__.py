"""Script Shell – a login-gated desktop shell built on pywebview."""
