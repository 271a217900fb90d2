"""Unit tests for configuration and execution planning."""

import io
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from walktreelib import (
    DEFAULT_STRATEGIES,
    CapabilityMismatchError,
    ExecutionPlan,
    MetadataCollector,
    PerformanceConfig,
    SessionConfig,
    TraversalStrategy,
    TreeShape,
    parse_strategy,
    run_session,
)
from walktreelib.planning import recursion_budget, tree_height


class TestSessionConfig(unittest.TestCase):

    def test_defaults(self):
        config = SessionConfig.default()
        self.assertEqual(config.general, TreeShape(depth=2, branching=3))
        self.assertEqual(config.binary, TreeShape(depth=3, branching=2))
        self.assertEqual(config.strategies, DEFAULT_STRATEGIES)
        self.assertEqual(config.validate(), [])

    def test_in_order_uses_binary_tree(self):
        config = SessionConfig.default()
        self.assertIs(config.shape_for(TraversalStrategy.IN_ORDER), config.binary)
        for strategy in (TraversalStrategy.PRE_ORDER, TraversalStrategy.QUEUE_BFS):
            self.assertIs(config.shape_for(strategy), config.general)

    def test_validation_errors(self):
        config = SessionConfig(
            general=TreeShape(depth=-1, branching=3),
            binary=TreeShape(depth=2, branching=-2),
            strategies=(),
            performance=PerformanceConfig(max_nodes=0),
        )
        errors = config.validate()
        self.assertIn("general tree depth cannot be negative", errors)
        self.assertIn("binary tree branching cannot be negative", errors)
        self.assertIn("at least one strategy is required", errors)
        self.assertIn("max_nodes must be positive", errors)

    def test_non_integer_shape(self):
        errors = TreeShape(depth=1.5, branching=2).validate()
        self.assertEqual(errors, ["tree depth must be an integer"])

    def test_node_count(self):
        self.assertEqual(TreeShape(2, 3).node_count(), 13)
        self.assertEqual(TreeShape(3, 2).node_count(), 15)
        self.assertEqual(TreeShape(7, 1).node_count(), 8)
        self.assertEqual(TreeShape(7, 0).node_count(), 1)

    def test_strategy_labels(self):
        self.assertEqual(TraversalStrategy.PRE_ORDER.label, "Recursive DFS")
        self.assertEqual(TraversalStrategy.QUEUE_BFS.label, "Queue-based BFS")
        self.assertTrue(TraversalStrategy.IN_ORDER.is_recursive)
        self.assertFalse(TraversalStrategy.STACK_DFS.is_recursive)

    def test_strategy_names_in_config(self):
        """Names are accepted wherever enum members are."""
        config = SessionConfig(strategies=("pre", "BFS", TraversalStrategy.IN_ORDER))
        self.assertEqual(config.strategies, (
            TraversalStrategy.PRE_ORDER,
            TraversalStrategy.QUEUE_BFS,
            TraversalStrategy.IN_ORDER,
        ))
        self.assertEqual(config.validate(), [])
        (strategy, values), = ExecutionPlan(SessionConfig(strategies=["queue"])).execute()
        self.assertIs(strategy, TraversalStrategy.QUEUE_BFS)
        self.assertEqual(len(values), 13)

    def test_unparseable_strategy_reported_by_validate(self):
        config = SessionConfig(strategies=("pre", "spiral"))
        self.assertEqual(config.validate(), ["unknown strategy: 'spiral'"])
        with self.assertRaises(CapabilityMismatchError):
            ExecutionPlan(config)

    def test_parse_strategy(self):
        self.assertIs(parse_strategy("queue"), TraversalStrategy.QUEUE_BFS)
        self.assertIs(parse_strategy("PRE_ORDER"), TraversalStrategy.PRE_ORDER)
        self.assertIs(parse_strategy(" dfs_post "), TraversalStrategy.POST_ORDER)
        self.assertIs(parse_strategy(TraversalStrategy.IN_ORDER), TraversalStrategy.IN_ORDER)
        with self.assertRaises(ValueError):
            parse_strategy("sideways")


class TestExecutionPlan(unittest.TestCase):

    def test_default_plan_results(self):
        results = dict(ExecutionPlan().execute())
        self.assertEqual(list(results), list(DEFAULT_STRATEGIES))
        self.assertEqual(results[TraversalStrategy.QUEUE_BFS],
                         [2, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0])
        self.assertEqual(results[TraversalStrategy.IN_ORDER],
                         [0, 1, 0, 2, 0, 1, 0, 3, 0, 1, 0, 2, 0, 1, 0])

    def test_trees_built_once(self):
        plan = ExecutionPlan()
        general = plan.tree_for(TraversalStrategy.PRE_ORDER)
        self.assertIs(plan.tree_for(TraversalStrategy.STACK_DFS), general)
        self.assertIsNot(plan.tree_for(TraversalStrategy.IN_ORDER), general)

    def test_strategy_selection(self):
        config = SessionConfig(strategies=(TraversalStrategy.POST_ORDER,))
        results = list(ExecutionPlan(config).execute())
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0][0], TraversalStrategy.POST_ORDER)

    def test_custom_collector(self):
        config = SessionConfig(strategies=(TraversalStrategy.PRE_ORDER,))
        plan = ExecutionPlan(config, collector=MetadataCollector())
        (_, data), = plan.execute()
        self.assertEqual(data[0], {'value': 2, 'child_count': 3, 'is_leaf': False})

    def test_invalid_config_rejected(self):
        config = SessionConfig(general=TreeShape(depth=-2, branching=3))
        with self.assertRaises(CapabilityMismatchError) as ctx:
            ExecutionPlan(config)
        self.assertIn("Invalid configuration", str(ctx.exception))

    def test_node_limit(self):
        config = SessionConfig(
            general=TreeShape(depth=10, branching=10),
            performance=PerformanceConfig(max_nodes=1000),
        )
        with self.assertRaises(CapabilityMismatchError) as ctx:
            ExecutionPlan(config)
        self.assertIn("general tree would have", str(ctx.exception))

    def test_node_limit_ignores_unused_tree(self):
        """A huge binary tree is fine if in-order is not requested."""
        config = SessionConfig(
            binary=TreeShape(depth=40, branching=2),
            strategies=(TraversalStrategy.QUEUE_BFS,),
        )
        ExecutionPlan(config)

    def test_no_node_limit(self):
        config = SessionConfig(performance=PerformanceConfig(max_nodes=None))
        self.assertEqual(config.validate(), [])
        ExecutionPlan(config)

    def test_recursion_budget(self):
        """Trees deeper than the call stack allows are refused up front."""
        too_deep = recursion_budget() + 1
        config = SessionConfig(
            general=TreeShape(depth=too_deep, branching=1),
            strategies=(TraversalStrategy.PRE_ORDER,),
            performance=PerformanceConfig(max_nodes=None),
        )
        with self.assertRaises(CapabilityMismatchError) as ctx:
            ExecutionPlan(config)
        self.assertIn("recursion budget", str(ctx.exception))

    def test_recursion_budget_for_in_order_tree(self):
        too_deep = recursion_budget() + 1
        config = SessionConfig(
            binary=TreeShape(depth=too_deep, branching=1),
            strategies=(TraversalStrategy.STACK_DFS, TraversalStrategy.IN_ORDER),
            performance=PerformanceConfig(max_nodes=None),
        )
        with self.assertRaises(CapabilityMismatchError) as ctx:
            ExecutionPlan(config)
        self.assertIn("binary tree depth", str(ctx.exception))

    def test_iterative_strategies_have_no_depth_limit(self):
        """Stack and queue sessions build and walk trees past the budget."""
        depth = sys.getrecursionlimit() * 2
        config = SessionConfig(
            general=TreeShape(depth=depth, branching=1),
            strategies=(TraversalStrategy.STACK_DFS, TraversalStrategy.QUEUE_BFS),
            performance=PerformanceConfig(max_nodes=None),
        )
        results = dict(ExecutionPlan(config).execute())
        self.assertEqual(results[TraversalStrategy.STACK_DFS], list(range(depth, -1, -1)))
        self.assertEqual(results[TraversalStrategy.QUEUE_BFS], list(range(depth, -1, -1)))

    def test_deepest_accepted_tree_runs(self):
        """Every recursive strategy completes at exactly the recursion budget."""
        depth = recursion_budget()
        config = SessionConfig(
            general=TreeShape(depth=depth, branching=1),
            binary=TreeShape(depth=depth, branching=1),
            strategies=(
                TraversalStrategy.PRE_ORDER,
                TraversalStrategy.POST_ORDER,
                TraversalStrategy.IN_ORDER,
            ),
            performance=PerformanceConfig(max_nodes=None),
        )
        stream = io.StringIO()
        results = run_session(config, stream)

        ascending = list(range(depth + 1))
        self.assertEqual(results[TraversalStrategy.PRE_ORDER], ascending[::-1])
        self.assertEqual(results[TraversalStrategy.POST_ORDER], ascending)
        self.assertEqual(results[TraversalStrategy.IN_ORDER], ascending)
        self.assertEqual(stream.getvalue().count("[#]"), 3)

    def test_zero_branching_has_no_height(self):
        shape = TreeShape(depth=10 ** 6, branching=0)
        self.assertEqual(tree_height(shape), 0)
        config = SessionConfig(general=shape, strategies=(TraversalStrategy.PRE_ORDER,))
        (_, values), = ExecutionPlan(config).execute()
        self.assertEqual(values, [10 ** 6])

    def test_explain(self):
        text = ExecutionPlan().explain()
        self.assertIn("general tree: depth=2 branching=3 nodes=13", text)
        self.assertIn("binary tree: depth=3 branching=2 nodes=15", text)
        self.assertIn("pre, post, stack, queue, in", text)


if __name__ == "__main__":
    unittest.main()
