import pytest
from pydantic import ValidationError

from geoproof.core.crypto.commitment import commit
from geoproof.core.field import MODULUS
from geoproof.schemas.proximity import PointWitness, ProximityClaim, ProximityWitness


def test_point_witness_accepts_ints_and_decimal_strings():
    w = PointWitness(x="84561568048516672", y=40514348451309242)
    p = w.to_point()
    assert p.as_list() == [84561568048516672, 40514348451309242, 0]

@pytest.mark.parametrize("bad", [-1, "-1", "12abc", "", "1.5", 1.5, True, MODULUS])
def test_point_witness_rejects_invalid_elements(bad):
    with pytest.raises(ValidationError):
        PointWitness(x=bad, y=0, z=0)

def test_point_witness_repr_hides_coordinates():
    w = PointWitness(x=84561568048516672, y=1, z=2)
    assert "84561568048516672" not in repr(w)

def test_claim_from_points(porto, lisbon, porto_commitment, lisbon_commitment):
    claim = ProximityClaim.from_points(porto, lisbon, 300_000_000_000)
    assert claim.commitment_a == porto_commitment
    assert claim.commitment_b == lisbon_commitment
    assert claim.public_inputs() == [
        str(porto_commitment), str(lisbon_commitment), "300000000000",
    ]

def test_claim_round_trips_public_inputs(porto, lisbon):
    claim = ProximityClaim.from_points(porto, lisbon, 300_000_000_000)
    a, b, t = claim.public_inputs()
    assert ProximityClaim(commitment_a=a, commitment_b=b, threshold=t) == claim

def test_claim_rejects_out_of_range_commitment():
    with pytest.raises(ValidationError):
        ProximityClaim(commitment_a=MODULUS, commitment_b=0, threshold=1)

def test_witness_keeps_points_apart(porto, lisbon):
    witness = ProximityWitness(
        point_a={"x": porto.x, "y": porto.y, "z": porto.z},
        point_b={"x": lisbon.x, "y": lisbon.y, "z": lisbon.z},
    )
    assert commit(witness.point_a.to_point()) != commit(witness.point_b.to_point())
