import os

from hypothesis import settings

settings.register_profile("ci", settings(max_examples=200))
settings.register_profile("dev", settings(max_examples=20))
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
