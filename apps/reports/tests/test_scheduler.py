import pytest
from unittest.mock import patch
from django.test import override_settings
from apps.reports.management.commands.run_scheduler import build_scheduler, monthly_closing_job

JOB_MODULE = 'apps.reports.management.commands.run_scheduler'


class TestScheduler:
    """Tests for the monthly closing scheduler wiring."""

    @override_settings(MONTHLY_CLOSING_CRON='0 0 1 * *', TIME_ZONE='America/Sao_Paulo')
    def test_job_registered_with_cron(self):
        scheduler = build_scheduler()
        job = scheduler.get_job('monthly_closing')

        assert job is not None
        assert job.func is monthly_closing_job
        fields = {f.name: str(f) for f in job.trigger.fields}
        assert fields['day'] == '1'
        assert fields['hour'] == '0'
        assert fields['minute'] == '0'

    @patch(f'{JOB_MODULE}.close_old_connections')
    def test_job_runs_closing(self, _close_connections):
        with patch(f'{JOB_MODULE}.close_previous_month') as close:
            monthly_closing_job()

        close.assert_called_once_with()

    @patch(f'{JOB_MODULE}.close_old_connections')
    def test_job_failure_propagates(self, close_connections):
        with patch(f'{JOB_MODULE}.close_previous_month', side_effect=RuntimeError('db down')):
            with pytest.raises(RuntimeError):
                monthly_closing_job()

        assert close_connections.call_count == 2
