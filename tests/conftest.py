from hypothesis import settings, HealthCheck, Phase

# Building and sampling large tables is slow next to the default deadline.
settings.register_profile(
    'default',
    settings(
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow],
    ))

settings.load_profile('default')

# Only the @example cases, for a quick pass under coverage.
settings.register_profile(
    'coverage',
    settings(settings.get_profile('default'), phases=[Phase.explicit]),
)

settings.register_profile(
    'thorough', settings(settings.get_profile('default'), max_examples=1000),
)
