DEFAULTS = {
    # Accept edges whose two endpoints are the same node
    "ALLOW_SELF_LOOPS": True,
    # Reject attribute records with non-str keys
    "STRICT_ATTRIBUTE_KEYS": True,
}
