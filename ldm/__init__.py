from .partition import Bipartition, PartialResult, largest_differencing_method
from .balance import get_balanced_bipartition, get_bipartition_difference
