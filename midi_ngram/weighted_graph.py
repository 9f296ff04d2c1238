import typing


NodeType = typing.TypeVar("NodeType")


class WeightedGraph (typing.Generic[NodeType]):

	"""
	A weighted directed graph whose edges strengthen each time they are added.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty weighted graph.
		"""

		self._edges: typing.Dict[NodeType, typing.Dict[NodeType, int]] = {}


	def add_transition (self, source: NodeType, target: NodeType, weight: int = 1) -> None:

		"""
		Add a weighted transition between two nodes.
		"""

		if weight <= 0:
			raise ValueError("Weight must be positive")

		if source not in self._edges:
			self._edges[source] = {}

		# If a transition already exists, accumulate to strengthen the edge.
		if target in self._edges[source]:
			self._edges[source][target] += weight

		else:
			self._edges[source][target] = weight


	def get_transitions (self, source: NodeType) -> typing.List[typing.Tuple[NodeType, int]]:

		"""
		Return weighted transitions for a source node.
		"""

		if source not in self._edges:
			return []

		return list(self._edges[source].items())


	def edges (self) -> typing.Iterator[typing.Tuple[NodeType, NodeType, int]]:

		"""
		Yield every ``(source, target, weight)`` edge in insertion order.
		"""

		for source in self._edges:
			for target, weight in self.get_transitions(source):
				yield source, target, weight


	def total_weight (self) -> int:

		"""
		Return the sum of all edge weights.
		"""

		return sum(weight for _, _, weight in self.edges())


	def __len__ (self) -> int:

		return sum(len(targets) for targets in self._edges.values())
