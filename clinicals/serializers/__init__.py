def decode(serializer_class, data):
    """Decode a request body into snake_case fields.

    A JSON ``null`` body stays ``None`` so the service can report the
    missing object itself.
    """
    if data is None:
        return None
    s = serializer_class(data=data)
    s.is_valid(raise_exception=True)
    return s.validated_data
