DEFAULTS = {
    # Fold traversal: "iterative" (work list) or "recursive" (call stack)
    "TRAVERSAL_STRATEGY": "iterative",
    # Skip simplify's equality checks above this many leaves (0 = uncapped)
    "SIMPLIFY_MAX_SIZE": 0,
}
