"""Tests for the Hamiltonian abstraction and the model systems.

Covers:
- TimeIndependentHamiltonian / CompositeHamiltonian
- validate() (Hermiticity at t=0)
- DrivenTLS, DrivenCavity, CoupledCavities
"""

import numpy as np
import pytest
from qutip import Qobj, sigmax

from qevolve.core.hamiltonian import (
    CompositeHamiltonian,
    Hamiltonian,
    TimeIndependentHamiltonian,
)
from qevolve.core.systems import CoupledCavities, DrivenCavity, DrivenTLS
from qevolve.exceptions import (
    DimensionMismatchError,
    HamiltonianError,
    InvalidParameterError,
)
from qevolve.utils.linalg import is_hermitian

SAMPLE_TIMES = [0.0, 0.013, 0.5, 1.7, -3.2, 42.0]


# =============================
# Helpers
# =============================


def _diag_hamiltonian(*values):
    return TimeIndependentHamiltonian(np.diag(values).astype(complex))


# =============================
# TimeIndependentHamiltonian
# =============================


class TestTimeIndependentHamiltonian:
    def test_sample_ignores_time(self):
        h = _diag_hamiltonian(1.0, -1.0)

        assert h.dimension == 2
        assert h.is_time_independent()
        assert h.period() is None
        out = h.sample(5.0)
        assert out[0, 0] == pytest.approx(1.0)
        assert out[1, 1] == pytest.approx(-1.0)
        assert np.array_equal(h.sample(0.0), h.sample(123.0))

    def test_sample_overwrites_caller_buffer(self):
        h = _diag_hamiltonian(1.0, 2.0)
        buffer = np.full((2, 2), 99.0 + 1j)

        returned = h.sample(0.0, buffer)

        assert returned is buffer
        assert np.array_equal(buffer, np.diag([1.0, 2.0]))

    def test_non_square_matrix_fails(self):
        with pytest.raises(DimensionMismatchError):
            TimeIndependentHamiltonian(np.zeros((2, 3)))

    def test_validate_non_hermitian(self):
        h = TimeIndependentHamiltonian(np.array([[0.0, 1.0], [0.0, 0.0]]))
        with pytest.raises(HamiltonianError, match="not Hermitian"):
            h.validate()

    def test_qobj_round_trip(self):
        h = TimeIndependentHamiltonian.from_qobj(sigmax())
        assert h.to_qobj() == sigmax()


# =============================
# CompositeHamiltonian
# =============================


class TestCompositeHamiltonian:
    def test_sum_of_terms(self):
        h1 = DrivenTLS(5.0, 4.0, 0.7, phase=0.3)
        h2 = _diag_hamiltonian(0.25, -0.25)
        composite = CompositeHamiltonian([h1, h2])

        for t in SAMPLE_TIMES:
            assert np.allclose(composite.sample(t), h1.sample(t) + h2.sample(t), atol=0.0)

    def test_buffer_is_zeroed_before_accumulating(self):
        composite = CompositeHamiltonian([_diag_hamiltonian(1.0, 2.0)])
        buffer = np.full((2, 2), 7.0 + 0j)
        composite.sample(0.0, buffer)
        assert np.array_equal(buffer, np.diag([1.0, 2.0]))

    def test_empty_fails(self):
        with pytest.raises(HamiltonianError, match="at least one term"):
            CompositeHamiltonian([])

    def test_dimension_mismatch_reports_expected_and_actual(self):
        h1 = DrivenTLS(5.0, 5.0, 0.5)
        h2 = _diag_hamiltonian(0.0, 1.0, 2.0)

        with pytest.raises(DimensionMismatchError) as excinfo:
            CompositeHamiltonian([h1, h2])

        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 3

    def test_time_independence_and_period(self):
        static = CompositeHamiltonian([_diag_hamiltonian(1.0, 2.0), _diag_hamiltonian(0.0, 1.0)])
        assert static.is_time_independent()
        assert static.period() is None

        driven = CompositeHamiltonian([DrivenTLS(5.0, 2.0, 0.1), _diag_hamiltonian(0.0, 1.0)])
        assert not driven.is_time_independent()
        assert driven.period() == pytest.approx(np.pi)

        incommensurate = CompositeHamiltonian([DrivenTLS(5.0, 2.0, 0.1), DrivenTLS(5.0, 3.0, 0.1)])
        assert incommensurate.period() is None

    def test_period_with_static_drive_terms(self):
        static = TimeIndependentHamiltonian(np.eye(2))
        composite = CompositeHamiltonian([static, DrivenTLS(1.0, 0.0, 0.5)])
        assert composite.is_time_independent()
        assert composite.period() is None

        mixed = CompositeHamiltonian([DrivenTLS(1.0, 0.0, 0.5), DrivenTLS(1.0, 2.0, 0.1)])
        assert not mixed.is_time_independent()
        assert mixed.period() == pytest.approx(np.pi)

    def test_len_and_iteration(self):
        terms = [_diag_hamiltonian(1.0, 2.0), DrivenTLS(1.0, 1.0, 1.0)]
        composite = CompositeHamiltonian(terms)
        assert len(composite) == 2
        assert list(composite) == terms


def test_hamiltonian_is_abstract():
    with pytest.raises(TypeError):
        Hamiltonian()


# =============================
# DrivenTLS
# =============================


class TestDrivenTLS:
    def test_resonant_drive(self):
        tls = DrivenTLS(5.0, 5.0, 0.5)

        assert tls.dimension == 2
        assert tls.detuning() == 0.0
        assert tls.phase == 0.0

        h0 = tls.sample(0.0)
        assert is_hermitian(h0, 1e-10)
        assert np.allclose(h0, [[2.5, 0.5], [0.5, -2.5]])
        tls.validate()

    def test_drive_term_and_period(self):
        tls = DrivenTLS.with_phase(4.0, 3.0, 0.2, np.pi / 2)
        t = 0.4
        expected = 0.2 * np.cos(3.0 * t + np.pi / 2)

        h = tls.sample(t)
        assert h[0, 1] == pytest.approx(expected)
        assert h[1, 0] == pytest.approx(expected)
        assert tls.period() == pytest.approx(2 * np.pi / 3.0)
        assert tls.detuning() == pytest.approx(1.0)
        assert np.allclose(tls.sample(t + tls.period()), h)

    def test_not_time_independent(self):
        assert not DrivenTLS(1.0, 1.0, 1.0).is_time_independent()

    def test_zero_drive_frequency_is_static(self):
        tls = DrivenTLS(1.0, 0.0, 0.5)

        assert tls.is_time_independent()
        assert tls.period() is None
        assert np.allclose(tls.sample(0.0), tls.sample(3.7))
        tls.validate()


# =============================
# DrivenCavity
# =============================


class TestDrivenCavity:
    def test_hermitian_at_several_times(self):
        cavity = DrivenCavity(10.0, 20.0, 0.3, 10)
        for t in SAMPLE_TIMES:
            assert is_hermitian(cavity.sample(t), 1e-10)
        cavity.validate()

    def test_matrix_elements(self):
        cavity = DrivenCavity(2.0, 1.0, 0.5, 5)
        t = 0.7
        h = cavity.sample(t)
        drive = 0.5 * np.cos(1.0 * t)

        assert np.allclose(np.diag(h).real, 2.0 * np.arange(5))
        for n in range(3):
            amp = drive * np.sqrt((n + 1) * (n + 2))
            assert h[n + 2, n] == pytest.approx(amp)
            assert h[n, n + 2] == pytest.approx(amp)
        # nearest neighbours are never coupled
        assert np.all(np.diag(h, 1) == 0)

    def test_small_dimension_has_no_drive(self):
        h = DrivenCavity(1.0, 1.0, 1.0, 2).sample(0.0)
        assert np.array_equal(h, np.diag([0.0, 1.0]))

    def test_period_and_invalid_dimension(self):
        assert DrivenCavity(1.0, 4.0, 0.1, 3).period() == pytest.approx(np.pi / 2)
        with pytest.raises(InvalidParameterError):
            DrivenCavity(1.0, 4.0, 0.1, 0)

    def test_zero_pump_frequency_is_static(self):
        cavity = DrivenCavity(1.0, 0.0, 0.1, 4)

        assert cavity.is_time_independent()
        assert cavity.period() is None
        assert np.allclose(cavity.sample(0.0), cavity.sample(2.5))


# =============================
# CoupledCavities
# =============================


class TestCoupledCavities:
    def test_ssh_alternating_couplings(self):
        ssh = CoupledCavities.ssh(5.0, 1.0, 0.5, 4)

        assert ssh.dimension == 5
        assert ssh.couplings == (1.0, 0.5, 1.0)
        assert ssh.is_time_independent()

        h = ssh.sample(0.0)
        assert h[0, 0] == 0.0
        assert np.allclose(np.diag(h)[1:], 5.0)
        assert h[1, 2] == 1.0 and h[2, 1] == 1.0
        assert h[2, 3] == 0.5 and h[3, 2] == 0.5
        assert h[3, 4] == 1.0 and h[4, 3] == 1.0
        # ground level is decoupled
        assert np.all(h[0, 1:] == 0)
        assert is_hermitian(h)

    def test_uniform(self):
        chain = CoupledCavities.uniform(2.0, 0.3, 6)
        assert len(chain.couplings) == 5
        assert np.allclose(np.diag(chain.sample(1.0), 1)[1:], 0.3)

    def test_single_cavity(self):
        single = CoupledCavities.uniform(2.0, 0.3, 1)
        assert single.dimension == 2
        assert np.array_equal(single.sample(0.0), np.diag([0.0, 2.0]))

    def test_invalid_arguments(self):
        with pytest.raises(InvalidParameterError):
            CoupledCavities(1.0, [0.1, 0.2], 2)
        with pytest.raises(InvalidParameterError):
            CoupledCavities.ssh(1.0, 0.1, 0.2, 0)
