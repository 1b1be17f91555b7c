"""
Smoke check for the face-index generator.

Run this to check that all components are working:
    python scripts/check_setup.py
"""

import sys
from pathlib import Path

# Add project root to path
project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))


def check_imports():
    """Check that all modules can be imported."""
    print("Checking imports...")
    
    try:
        from faceindex.core.config import settings
        print(f"✓ Config loaded ({settings.app_name}, walk limit {settings.walk_max_length})")
        
        from faceindex.core.logging import get_logger
        print("✓ Logging configured")
        
        from faceindex.face import synthesize, encode, decode, validate, map_geometry
        print("✓ Face modules imported")
        
        return True
        
    except Exception as e:
        print(f"✗ Import failed: {e}")
        return False


def check_codec():
    """Check the reference codec on the neutral reference."""
    print("\nChecking reference codec...")
    
    try:
        from faceindex.face import DEFAULT_SEED, decode, encode, validate
        
        reference = encode(DEFAULT_SEED)
        assert reference == "80" * 12, f"Expected neutral reference, got {reference}"
        print(f"✓ Default seed encodes to {reference}")
        
        assert validate(reference)
        assert decode(reference) == DEFAULT_SEED
        print("✓ Neutral reference decodes to the default seed")
        
        return True
        
    except Exception as e:
        print(f"✗ Codec check failed: {e}")
        import traceback
        traceback.print_exc()
        return False


def check_face_generation():
    """Check a short walk of generated faces."""
    print("\nChecking face generation...")
    
    try:
        from faceindex.face import generate_face, walk_faces
        
        face = generate_face(0)
        print(f"✓ Face 0 upper lip: {face.geometry.mouth.upper_lip_path()}")
        
        faces = list(walk_faces(0, 10, face.reference))
        assert len(faces) == 10, f"Expected 10 faces, got {len(faces)}"
        for f in faces:
            geometry = f.geometry
            assert geometry.eyebrows.y < geometry.eyes.y < geometry.nose.y < geometry.mouth.y
        print(f"✓ Walked {len(faces)} faces with ordered feature rows")
        
        return True
        
    except Exception as e:
        print(f"✗ Face generation check failed: {e}")
        import traceback
        traceback.print_exc()
        return False


def main():
    """Run all checks."""
    print("=" * 60)
    print("Face Index - Setup Check")
    print("=" * 60)
    
    results = []
    
    results.append(("Imports", check_imports()))
    results.append(("Reference Codec", check_codec()))
    results.append(("Face Generation", check_face_generation()))
    
    print("\n" + "=" * 60)
    print("Check Results:")
    print("=" * 60)
    
    all_passed = True
    for check_name, passed in results:
        status = "PASS" if passed else "FAIL"
        symbol = "✓" if passed else "✗"
        print(f"{symbol} {check_name}: {status}")
        if not passed:
            all_passed = False
    
    print("=" * 60)
    
    if all_passed:
        print("\nAll checks passed.")
        return 0
    else:
        print("\nSome checks failed. See the output above.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
