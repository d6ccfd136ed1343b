from __future__ import annotations

from typing import Dict, List, Tuple

from shortpath.lib.graph import Cost, EdgeID, VertexID

#: Distance from the source to each reached vertex.
DistanceTable = Dict[VertexID, Cost]

#: For each reached vertex, predecessor vertex -> keys of the edges used from it.
PredMap = Dict[VertexID, Dict[VertexID, List[EdgeID]]]

#: A single path element is a tuple of:
#:   - The current vertex.
#:   - A tuple of one or more parallel edge keys from this vertex to the next one.
#: The final element of a complete path has an empty tuple.
PathElement = Tuple[VertexID, Tuple[EdgeID, ...]]

#: A path is a tuple of PathElements from a source vertex to a destination vertex.
PathTuple = Tuple[PathElement, ...]
