import unittest

from study_companion.study_core.common.errors import ProgressError
from study_companion.study_core.domain.roadmap_config import RoadmapConfig
from study_companion.study_core.domain.study_enums import ExamGoal, Strategy
from study_companion.study_core.service.progress.roadmap_progress_service import RoadmapProgressService
from study_companion.study_core.service.roadmap.roadmap_generator import RoadmapGeneratorService


class RoadmapProgressServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        config = RoadmapConfig(exam_goal=ExamGoal.SAT, strategy=Strategy.BALANCED, daily_minutes=45, seed=42)
        self.nodes = RoadmapGeneratorService().generate(config)
        self.service = RoadmapProgressService()

    def test_toggle_microtask_awards_xp_once(self) -> None:
        """
        마이크로태스크 완료 시 10 XP, 되돌리면 0 XP이고 진행률이 다시 계산되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        node = self.nodes[0]
        task = node.microtasks[0]
        update = self.service.toggle_microtask(self.nodes, node.node_id, task.task_id)
        self.assertEqual(update.xp_earned, 10)
        toggled = update.nodes[0]
        self.assertTrue(toggled.microtasks[0].is_complete)
        expected_pct = int(1 / len(node.microtasks) * 100 + 0.5)
        self.assertEqual(toggled.progress_pct, expected_pct)

        reverted = self.service.toggle_microtask(update.nodes, node.node_id, task.task_id)
        self.assertEqual(reverted.xp_earned, 0)
        self.assertEqual(reverted.nodes[0].progress_pct, 0)

    def test_operations_do_not_mutate_input(self) -> None:
        before = [node.to_dict() for node in self.nodes]
        self.service.toggle_microtask(self.nodes, "node-1", self.nodes[0].microtasks[0].task_id)
        self.service.toggle_node_complete(self.nodes, "node-2")
        self.service.toggle_expanded(self.nodes, "node-3")
        self.service.move_node(self.nodes, 1, 1)
        self.assertEqual([node.to_dict() for node in self.nodes], before)

    def test_toggle_node_complete_round_trip(self) -> None:
        """
        노드 완료 처리 시 xp_value를 주고, 다시 토글하면 초기화되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        node = self.nodes[2]
        update = self.service.toggle_node_complete(self.nodes, node.node_id)
        self.assertEqual(update.xp_earned, node.xp_value)
        completed = update.nodes[2]
        self.assertEqual(completed.progress_pct, 100)
        self.assertTrue(all(task.is_complete for task in completed.microtasks))

        reset = self.service.toggle_node_complete(update.nodes, node.node_id)
        self.assertEqual(reset.xp_earned, 0)
        self.assertEqual(reset.nodes[2].progress_pct, 0)
        self.assertTrue(all(not task.is_complete for task in reset.nodes[2].microtasks))

    def test_toggle_expanded(self) -> None:
        nodes = self.service.toggle_expanded(self.nodes, "node-1")
        self.assertFalse(nodes[0].is_expanded)
        nodes = self.service.toggle_expanded(nodes, "node-2")
        self.assertTrue(nodes[1].is_expanded)

    def test_move_node_swaps_neighbours(self) -> None:
        """
        이웃과 자리를 바꾸고, 양 끝을 넘는 이동은 무시하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        ids = [node.node_id for node in self.nodes]
        moved = self.service.move_node(self.nodes, 1, 1)
        self.assertEqual([node.node_id for node in moved][1:3], [ids[2], ids[1]])

        self.assertEqual([node.node_id for node in self.service.move_node(self.nodes, 0, -1)], ids)
        last = len(ids) - 1
        self.assertEqual([node.node_id for node in self.service.move_node(self.nodes, last, 1)], ids)

    def test_invalid_targets_raise(self) -> None:
        with self.assertRaises(ProgressError):
            self.service.toggle_expanded(self.nodes, "node-99")
        with self.assertRaises(ProgressError):
            self.service.toggle_microtask(self.nodes, "node-1", "mt-9-9")
        with self.assertRaises(ProgressError):
            self.service.move_node(self.nodes, 0, 2)
        with self.assertRaises(ProgressError):
            self.service.move_node(self.nodes, len(self.nodes), -1)

    def test_summarize(self) -> None:
        """
        완료 노드/XP/남은 시간을 합산하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        empty = self.service.summarize([])
        self.assertEqual(empty.progress_pct, 0)
        self.assertEqual(empty.total_tasks, 0)

        fresh = self.service.summarize(self.nodes)
        total_minutes = sum(node.est_minutes for node in self.nodes)
        self.assertEqual(fresh.total_minutes, total_minutes)
        self.assertEqual(fresh.remaining_minutes, total_minutes)
        self.assertEqual(fresh.completed_nodes, 0)

        update = self.service.toggle_node_complete(self.nodes, "node-1")
        summary = self.service.summarize(update.nodes)
        first = self.nodes[0]
        self.assertEqual(summary.completed_nodes, 1)
        self.assertEqual(summary.earned_xp, first.xp_value)
        self.assertEqual(summary.completed_tasks, len(first.microtasks))
        self.assertEqual(summary.remaining_minutes, total_minutes - first.est_minutes)
        self.assertEqual(summary.to_dict()["total_tasks"], fresh.total_tasks)


if __name__ == "__main__":
    unittest.main()
