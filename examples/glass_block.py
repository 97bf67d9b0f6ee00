from py_vec3 import Vector3, Viewport, ZeroLengthError

normal = Vector3(0, 1, 0)
incident = Vector3(1, -1, 0).normalize()

print(f'Angle of incidence: {Vector3.angle(-incident, normal):.2f} deg')

# air into glass, then glass back into air at a steeper angle
into_glass = Vector3.refract(incident, normal, 1 / 1.5)
print(f'Refracted into glass: {into_glass}')

grazing = Vector3(1, -0.2, 0).normalize()
out_of_glass = Vector3.refract(grazing, normal, 1.5)
if out_of_glass == Vector3():
    print(f'Total internal reflection, bounced to {Vector3.reflect(grazing, normal)}')

screen = Viewport(800, 600, fov=300.0, viewer_distance=5.0)
for corner in (Vector3(-1, -1, 1), Vector3(1, 1, 1), Vector3(1, 1, -5)):
    print(f'{corner} -> {screen.project(corner)}')

try:
    Vector3().normalize()
except ZeroLengthError as err:
    print(f'normalize failed: {err}')
