"""Unit tests for SessionOrchestrator."""

import pytest

from derived_metrics.application.training.orchestrators.session_orchestrator import (
    SessionOrchestrator,
)
from derived_metrics.domain.shared.errors import MissingInputError
from derived_metrics.domain.shared.measurement import Measurement
from derived_metrics.domain.training_load.calculation.muscle_work_service import (
    MuscleWorkService,
)
from derived_metrics.domain.training_load.calculation.work_power_service import (
    WorkPowerService,
)
from derived_metrics.domain.training_load.core.value_objects import (
    ExerciseSetRecord,
    MuscleGroups,
    UserStats,
    WorkPowerConstants,
)


class TestSessionOrchestrator:
    """Test session analysis flow."""

    def setup_method(self):
        """Set up test fixtures."""
        self.orchestrator = SessionOrchestrator(
            work_power_service=WorkPowerService(),
            muscle_work_service=MuscleWorkService(),
        )
        self.stats = UserStats(
            weight=Measurement(value=80, unit="kg"),
            arm_length=Measurement(value=60, unit="cm"),
            leg_length=Measurement(value=90, unit="cm"),
        )
        self.bench = ExerciseSetRecord(
            reps=5,
            external_load=Measurement(value=100, unit="kg"),
            constants=WorkPowerConstants(arm_length_factor=0.5),
            muscle_groups=MuscleGroups(primary="chest", secondary="triceps"),
        )

    def test_analyze(self):
        """Test work, muscle load and intensities come from the same sets."""
        analysis = self.orchestrator.analyze(
            self.stats, [self.bench], duration=Measurement(value=30, unit="s")
        )

        # 100 kg * 9.81 * 0.30 m * 5
        assert analysis.work_power.all_work.value == pytest.approx(1471.5)
        assert analysis.work_power.average_power.value == pytest.approx(49.05)
        assert analysis.muscle_work == {"chest": 500.0, "triceps": 250.0}
        assert analysis.intensities == {"chest": 1.0, "triceps": 0.5}

    def test_streamed_sets_feed_both_services(self):
        """Test a one-shot iterable reaches work/power and muscle work alike."""
        analysis = self.orchestrator.analyze(
            self.stats, (record for record in [self.bench])
        )

        assert analysis.work_power.all_work.value == pytest.approx(1471.5)
        assert analysis.muscle_work == {"chest": 500.0, "triceps": 250.0}

    def test_missing_stats_propagate(self):
        """Test input errors from services are not swallowed."""
        with pytest.raises(MissingInputError):
            self.orchestrator.analyze(UserStats(), [self.bench])
