"""The ASGI side: per-request pipeline, error pages and the pounce launcher."""
