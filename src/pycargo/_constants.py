"""Internal constants shared across the library."""

#: Principal that deployed the contracts. Holds owner privileges unless
#: :class:`pycargo.config.CargoConfig` names another actor.
DEFAULT_OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

LOCATION_TRACKING = "location-tracking"
CONDITION_MONITORING = "condition-monitoring"

#: Location ids start here and grow by one per registration.
FIRST_LOCATION_ID = 1
