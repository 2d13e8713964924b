"""ASGI request pipeline and pounce server bootstrap."""
