import numpy as np

from gearsengine.logger import Logger, LogLevel
from gearsengine.model import Mesh, Model
from gearsengine.scene import ObjectList, Scene, SceneObject


def test_default_transform_is_identity():
    assert np.allclose(SceneObject().transform(), np.identity(4))


def test_transform_moves_origin_to_position():
    obj = SceneObject(position=np.array([4.0, -2.0, 7.5]), rotation=np.array([30.0, 45.0, 60.0]))
    moved = obj.transform() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(moved[:3], obj.position)


def test_transform_scale_only_is_diagonal():
    obj = SceneObject(scale=np.array([2.0, 3.0, 4.0]))
    assert np.allclose(obj.transform(), np.diag([2.0, 3.0, 4.0, 1.0]))


def test_rotation_preserves_lengths():
    obj = SceneObject(rotation=np.array([10.0, 20.0, 30.0]))
    linear = obj.transform()[:3, :3]
    assert np.allclose(linear.T @ linear, np.identity(3))


def test_has_meshes():
    obj = SceneObject()
    assert obj.has_meshes() is False
    model = Model()
    model.meshes.append(Mesh())
    assert SceneObject(model=model).has_meshes() is True


def test_default_colors():
    obj = SceneObject()
    assert np.allclose(obj.highlight_color, [1.0, 1.0, 1.0, 1.0])
    assert np.allclose(obj.base_color, [0.0, 0.0, 1.0])


def test_object_info_format():
    obj = SceneObject(
        position=np.array([1.0, 2.0, 3.0]),
        rotation=np.array([0.0, 90.0, 0.0]),
        scale=np.array([1.0, 1.0, 1.0]),
        object_name="crate",
    )
    assert obj.object_info() == (
        "Object: crate\n"
        "Position: (1.000000, 2.000000, 3.000000)\n"
        "Rotation: (0.000000, 90.000000, 0.000000)\n"
        "Scale: (1.000000, 1.000000, 1.000000)"
    )


def test_scene_add_and_log(tmp_path):
    scene = Scene()
    scene.add_object(SceneObject(object_name="a"))
    scene.add_object(SceneObject(object_name="b"))
    logger = Logger(log_file=tmp_path / "log.txt")

    entries = scene.log_objects_info(logger)

    assert len(scene.objects) == 2
    assert [e.level for e in entries] == [LogLevel.INFO, LogLevel.INFO]
    assert entries[0].message.startswith("Object: a\n")
    assert entries[1].message.startswith("Object: b\n")
    assert logger.logs() == tuple(entries)


def test_object_list_starts_unselected():
    assert ObjectList().model_index == -1


def test_set_model_index_in_range():
    objects = ObjectList()
    objects.loaded_models.extend([Model(), Model()])
    objects.set_model_index(1)
    assert objects.model_index == 1


def test_set_model_index_out_of_range_is_ignored():
    objects = ObjectList()
    objects.loaded_models.append(Model())
    objects.set_model_index(0)
    objects.set_model_index(1)
    objects.set_model_index(-1)
    assert objects.model_index == 0