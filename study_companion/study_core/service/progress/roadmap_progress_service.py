from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from study_companion.study_core.common.errors import ProgressError
from study_companion.study_core.common.math_utils import round_half_up
from study_companion.study_core.domain.progress_summary import ProgressSummary, ProgressUpdate
from study_companion.study_core.domain.roadmap_node import RoadmapNode

MICROTASK_XP = 10
COMPLETE_PCT = 100


class RoadmapProgressService:
    """
    생성된 로드맵 위에서 진행 상태를 갱신하는 서비스.

    모든 연산은 입력 노드 목록을 변경하지 않고 새 목록을 반환합니다.
    """

    def toggle_microtask(self, nodes: Sequence[RoadmapNode], node_id: str, task_id: str) -> ProgressUpdate:
        """
        마이크로태스크 완료 여부를 뒤집고 노드 진행률을 다시 계산합니다.

        @param {Sequence[RoadmapNode]} nodes - 현재 노드 목록.
        @param {str} node_id - 대상 노드 ID.
        @param {str} task_id - 대상 마이크로태스크 ID.
        @returns {ProgressUpdate} 새 노드 목록과 획득 XP (완료로 바뀐 경우에만 10).
        """
        position = _index_of(nodes, node_id)
        node = nodes[position]
        xp_earned = 0
        microtasks = []
        found = False
        for task in node.microtasks:
            if task.task_id == task_id:
                found = True
                if not task.is_complete:
                    xp_earned = MICROTASK_XP
                task = replace(task, is_complete=not task.is_complete)
            microtasks.append(task)
        if not found:
            raise ProgressError(f"마이크로태스크를 찾을 수 없습니다: {node_id}/{task_id}")

        completed = sum(1 for task in microtasks if task.is_complete)
        progress_pct = round_half_up(completed / len(microtasks) * 100)
        updated = replace(node, microtasks=microtasks, progress_pct=progress_pct)
        return ProgressUpdate(nodes=_with_node(nodes, position, updated), xp_earned=xp_earned)

    def toggle_node_complete(self, nodes: Sequence[RoadmapNode], node_id: str) -> ProgressUpdate:
        """
        노드 전체를 완료 처리하거나, 이미 완료된 경우 초기화합니다.

        @param {Sequence[RoadmapNode]} nodes - 현재 노드 목록.
        @param {str} node_id - 대상 노드 ID.
        @returns {ProgressUpdate} 새 노드 목록과 획득 XP (완료 처리 시 노드 xp_value).
        """
        position = _index_of(nodes, node_id)
        node = nodes[position]
        completing = node.progress_pct < COMPLETE_PCT
        updated = replace(
            node,
            progress_pct=COMPLETE_PCT if completing else 0,
            microtasks=[replace(task, is_complete=completing) for task in node.microtasks],
        )
        xp_earned = node.xp_value if completing else 0
        return ProgressUpdate(nodes=_with_node(nodes, position, updated), xp_earned=xp_earned)

    def toggle_expanded(self, nodes: Sequence[RoadmapNode], node_id: str) -> List[RoadmapNode]:
        """
        @param {Sequence[RoadmapNode]} nodes - 현재 노드 목록.
        @param {str} node_id - 대상 노드 ID.
        @returns {List[RoadmapNode]} 펼침 상태가 뒤집힌 새 노드 목록.
        """
        position = _index_of(nodes, node_id)
        node = nodes[position]
        return _with_node(nodes, position, replace(node, is_expanded=not node.is_expanded))

    def move_node(self, nodes: Sequence[RoadmapNode], index: int, direction: int) -> List[RoadmapNode]:
        """
        노드를 이웃 노드와 자리 바꿈합니다. 양 끝을 넘어가는 이동은 무시합니다.

        @param {Sequence[RoadmapNode]} nodes - 현재 노드 목록.
        @param {int} index - 이동할 노드 위치.
        @param {int} direction - -1(위) 또는 1(아래).
        @returns {List[RoadmapNode]} 재정렬된 새 노드 목록.
        """
        if direction not in (-1, 1):
            raise ProgressError(f"이동 방향은 -1 또는 1 이어야 합니다: {direction}")
        if not 0 <= index < len(nodes):
            raise ProgressError(f"노드 위치가 범위를 벗어났습니다: {index}")
        reordered = list(nodes)
        target = index + direction
        if 0 <= target < len(reordered):
            reordered[index], reordered[target] = reordered[target], reordered[index]
        return reordered

    def summarize(self, nodes: Sequence[RoadmapNode]) -> ProgressSummary:
        """
        @param {Sequence[RoadmapNode]} nodes - 현재 노드 목록.
        @returns {ProgressSummary} 전체 진행률 요약.
        """
        total_tasks = sum(len(node.microtasks) for node in nodes)
        completed_tasks = sum(1 for node in nodes for task in node.microtasks if task.is_complete)
        completed_nodes = [node for node in nodes if node.progress_pct >= COMPLETE_PCT]
        remaining_minutes = sum(task.est_min for node in nodes for task in node.microtasks if not task.is_complete)
        return ProgressSummary(
            total_tasks=total_tasks,
            completed_tasks=completed_tasks,
            progress_pct=round_half_up(completed_tasks / total_tasks * 100) if total_tasks else 0,
            completed_nodes=len(completed_nodes),
            earned_xp=sum(node.xp_value for node in completed_nodes),
            total_minutes=sum(node.est_minutes for node in nodes),
            remaining_minutes=remaining_minutes,
        )


def _index_of(nodes: Sequence[RoadmapNode], node_id: str) -> int:
    for position, node in enumerate(nodes):
        if node.node_id == node_id:
            return position
    raise ProgressError(f"노드를 찾을 수 없습니다: {node_id}")


def _with_node(nodes: Sequence[RoadmapNode], position: int, node: RoadmapNode) -> List[RoadmapNode]:
    updated = list(nodes)
    updated[position] = node
    return updated
