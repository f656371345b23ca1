from early_edge.aggregation.stats import aggregate, overall_winrate  # noqa: F401
from early_edge.aggregation.strategies import (  # noqa: F401
    BinnedStrategy,
    ExactValueStrategy,
    RoundedValueStrategy,
)
