"""Unity class ID to type name table for text-serialized assets."""

GAME_OBJECT = 1
TRANSFORM = 4
MONO_BEHAVIOUR = 114
RECT_TRANSFORM = 224
PREFAB_INSTANCE = 1001

CLASS_IDS = {
    1: "GameObject",
    4: "Transform",
    20: "Camera",
    23: "MeshRenderer",
    29: "OcclusionCullingSettings",
    33: "MeshFilter",
    50: "Rigidbody2D",
    54: "Rigidbody",
    58: "CircleCollider2D",
    61: "BoxCollider2D",
    64: "MeshCollider",
    65: "BoxCollider",
    81: "AudioListener",
    82: "AudioSource",
    95: "Animator",
    96: "TrailRenderer",
    102: "TextMesh",
    104: "RenderSettings",
    108: "Light",
    111: "Animation",
    114: "MonoBehaviour",
    120: "LineRenderer",
    135: "SphereCollider",
    136: "CapsuleCollider",
    137: "SkinnedMeshRenderer",
    143: "CharacterController",
    157: "LightmapSettings",
    195: "NavMeshAgent",
    196: "NavMeshSettings",
    198: "ParticleSystem",
    199: "ParticleSystemRenderer",
    205: "LODGroup",
    208: "NavMeshObstacle",
    212: "SpriteRenderer",
    222: "CanvasRenderer",
    223: "Canvas",
    224: "RectTransform",
    225: "CanvasGroup",
    1001: "PrefabInstance",
    1660057539: "SceneRoots",
}


def class_name(class_id: int) -> str:
    """Type name for a class ID, falling back to a generic label."""
    return CLASS_IDS.get(class_id, f"Class{class_id}")
