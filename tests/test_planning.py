"""Tests for TraversalConfig validation and ExecutionPlan."""

import logging
import unittest

from navtreelib import (
    CacheConfig,
    CacheStrategy,
    CapabilityMismatchError,
    DepthConfig,
    ExecutionPlan,
    FilterConfig,
    InvalidStartError,
    TraversalConfig,
    TraversalDirection,
)
from navtreelib.navigators import CachingNavigator, MutableTreeNode, TreeNodeNavigator
from navtreelib.testing import (
    CountingNavigator,
    contents,
    create_deep_binary_tree,
    find_by_content,
)


class TestTraversalConfig(unittest.TestCase):

    def test_defaults_are_valid(self):
        config = TraversalConfig()
        self.assertEqual(config.validate(), [])
        self.assertIs(config.direction, TraversalDirection.FORWARD)
        self.assertTrue(config.subtree_only)

    def test_presets(self):
        self.assertIs(TraversalConfig.reverse_scan().direction, TraversalDirection.INVERSE)
        self.assertEqual(TraversalConfig.shallow_scan().depth.max_depth, 1)
        self.assertEqual(TraversalConfig.shallow_scan(max_depth=3).depth.max_depth, 3)

    def test_invalid_values_reported(self):
        config = TraversalConfig(
            depth=DepthConfig(min_depth=2, max_depth=1),
            max_nodes=0,
        )
        errors = config.validate()
        self.assertIn("max_depth cannot be less than min_depth", errors)
        self.assertIn("max_nodes must be positive", errors)

    def test_negative_depths(self):
        errors = TraversalConfig(depth=DepthConfig(min_depth=-1)).validate()
        self.assertIn("min_depth cannot be negative", errors)

    def test_cache_sizing_only_checked_when_used(self):
        config = TraversalConfig(cache=CacheConfig(max_size=0))
        self.assertEqual(config.validate(), [])

        config.cache_strategy = CacheStrategy.MEMORY
        self.assertIn("cache max_size must be positive", config.validate())

    def test_unknown_direction(self):
        errors = TraversalConfig(direction="sideways").validate()
        self.assertEqual(len(errors), 1)

    def test_unknown_cache_strategy(self):
        errors = TraversalConfig(cache_strategy="memory").validate()
        self.assertEqual(errors, ["unknown cache strategy: 'memory'"])

    def test_filter_config(self):
        filters = FilterConfig(include_filter=lambda n: n > 0, exclude_filter=lambda n: n > 5)
        self.assertTrue(filters.should_include(3))
        self.assertFalse(filters.should_include(-1))
        self.assertFalse(filters.should_include(7))
        self.assertTrue(FilterConfig().should_include(None))

    def test_depth_config(self):
        depth = DepthConfig(min_depth=1, max_depth=2)
        self.assertEqual([depth.should_yield(d) for d in range(4)],
                         [False, True, True, False])


class TestExecutionPlan(unittest.TestCase):

    def setUp(self):
        self.tree = create_deep_binary_tree()
        self.navigator = TreeNodeNavigator()

    def test_invalid_config_rejected_before_navigation(self):
        navigator = CountingNavigator(self.navigator)
        config = TraversalConfig(max_nodes=-5)
        with self.assertRaises(CapabilityMismatchError) as context:
            ExecutionPlan(config, navigator)
        self.assertIn("max_nodes must be positive", str(context.exception))
        self.assertEqual(navigator.get_summary(), {})

    def test_navigator_required(self):
        with self.assertRaises(ValueError):
            ExecutionPlan(TraversalConfig(), None)

    def test_execute_yields_nodes_with_depth(self):
        plan = ExecutionPlan(TraversalConfig.shallow_scan(), self.navigator)
        result = [(node.content, depth) for node, depth in plan.execute(self.tree)]
        self.assertEqual(result, [(1, 0), (2, 1), (9, 1)])

    def test_min_depth(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3))
        plan = ExecutionPlan(config, self.navigator)
        nodes = [node for node, _ in plan.execute(self.tree)]
        self.assertEqual(contents(nodes), [4, 5, 7, 8, 11, 12, 14, 15])
        self.assertEqual(plan.nodes_processed, 15)
        self.assertEqual(plan.nodes_reported, 8)

    def test_max_nodes_applies_per_execution(self):
        plan = ExecutionPlan(TraversalConfig(max_nodes=2), self.navigator)
        first = [node for node, _ in plan.execute(self.tree)]
        second = [node for node, _ in plan.execute(self.tree)]
        self.assertEqual(contents(first), [1, 2])
        self.assertEqual(contents(second), [1, 2])

    def test_inverse_from_start(self):
        plan = ExecutionPlan(TraversalConfig.reverse_scan(), self.navigator)
        six = find_by_content(self.tree, 6)
        nodes = [node for node, _ in plan.execute(self.tree, start=six)]
        self.assertEqual(contents(nodes), [6, 5, 4, 3, 2, 1])

    def test_invalid_start_raised_by_execute(self):
        plan = ExecutionPlan(TraversalConfig(), self.navigator)
        with self.assertRaises(InvalidStartError):
            plan.execute(self.tree, start=MutableTreeNode("stranger"))

    def test_memory_cache_strategy(self):
        config = TraversalConfig(cache_strategy=CacheStrategy.MEMORY,
                                 cache=CacheConfig(max_size=100, ttl=60))
        with self.assertLogs('navtreelib.planning', level=logging.DEBUG):
            plan = ExecutionPlan(config, self.navigator)

        self.assertIsInstance(plan.navigator, CachingNavigator)
        self.assertEqual(plan.navigator.get_cache_stats()['max_size'], 100)
        nodes = [node for node, _ in plan.execute(self.tree)]
        self.assertEqual(contents(nodes), list(range(1, 16)))

    def test_cache_strategy_name_rejected(self):
        config = TraversalConfig(cache_strategy="memory")
        with self.assertRaises(CapabilityMismatchError):
            ExecutionPlan(config, self.navigator)

    def test_no_cache_keeps_navigator(self):
        plan = ExecutionPlan(TraversalConfig(), self.navigator)
        self.assertIs(plan.navigator, self.navigator)

    def test_summary(self):
        plan = ExecutionPlan(TraversalConfig(max_nodes=3), self.navigator)
        summary = plan.summary()
        self.assertIn("direction: FORWARD", summary)
        self.assertIn("max_nodes: 3", summary)
        self.assertIn("navigator: TreeNodeNavigator", summary)


if __name__ == '__main__':
    unittest.main()
