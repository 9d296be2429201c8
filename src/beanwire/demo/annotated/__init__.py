"""Components registered with ``@component`` and discovered by ``scan``."""
