from study_companion.study_core.domain.content_analysis import ContentAnalysis
from study_companion.study_core.domain.microtask import Microtask
from study_companion.study_core.domain.progress_summary import ProgressSummary, ProgressUpdate
from study_companion.study_core.domain.roadmap_config import RoadmapConfig
from study_companion.study_core.domain.roadmap_node import RoadmapNode
from study_companion.study_core.domain.strategy_profile import StrategyProfile
from study_companion.study_core.domain.study_enums import Difficulty, ExamGoal, Strategy, TaskType
from study_companion.study_core.domain.study_kit import ConceptNode, Flashcard, QuizQuestion
from study_companion.study_core.domain.study_source import StudySource

__all__ = [
    "ConceptNode",
    "ContentAnalysis",
    "Difficulty",
    "ExamGoal",
    "Flashcard",
    "Microtask",
    "ProgressSummary",
    "ProgressUpdate",
    "QuizQuestion",
    "RoadmapConfig",
    "RoadmapNode",
    "Strategy",
    "StrategyProfile",
    "StudySource",
    "TaskType",
]
