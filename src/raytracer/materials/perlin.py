# raytracer/materials/perlin.py
import math
import numpy as np
from raytracer.core.vector import Vector3

def fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)

def lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)

def grad(hash_value: int, x: float, y: float, z: float) -> float:
    # Pick one of 12 gradient directions from the low 4 bits of the hash.
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)

class Perlin:
    """
    3D gradient (Perlin) noise with a permutation table drawn from a seeded
    numpy generator. Output lies roughly in [-1, 1] and is 0 on lattice points.
    """
    def __init__(self, seed: int = 0):
        self.seed = seed
        permutation = np.random.default_rng(seed).permutation(256)
        self.p = np.concatenate([permutation, permutation]).tolist()

    def get(self, x: float, y: float, z: float) -> float:
        p = self.p

        # Integer parts
        fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
        xi, yi, zi = int(fx) & 255, int(fy) & 255, int(fz) & 255

        # Fractional parts
        x, y, z = x - fx, y - fy, z - fz

        # Fade curves
        u, v, w = fade(x), fade(y), fade(z)

        # Hash coordinates of the cube corners
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        # Blend
        return lerp(w,
                    lerp(v,
                         lerp(u, grad(p[aa], x, y, z), grad(p[ba], x - 1, y, z)),
                         lerp(u, grad(p[ab], x, y - 1, z), grad(p[bb], x - 1, y - 1, z))),
                    lerp(v,
                         lerp(u, grad(p[aa + 1], x, y, z - 1), grad(p[ba + 1], x - 1, y, z - 1)),
                         lerp(u, grad(p[ab + 1], x, y - 1, z - 1), grad(p[bb + 1], x - 1, y - 1, z - 1))))

class Fbm:
    """Fractal sum of Perlin octaves: frequency doubles, amplitude halves."""
    def __init__(self, seed: int = 0, octaves: int = 6, frequency: float = 1.0,
                 lacunarity: float = 2.0, persistence: float = 0.5):
        self.source = Perlin(seed)
        self.octaves = octaves
        self.frequency = frequency
        self.lacunarity = lacunarity
        self.persistence = persistence

    def get(self, x: float, y: float, z: float) -> float:
        total = 0.0
        freq = self.frequency
        amp = 1.0
        for _ in range(self.octaves):
            total += self.source.get(x * freq, y * freq, z * freq) * amp
            freq *= self.lacunarity
            amp *= self.persistence
        return total

class Turbulence:
    """
    Domain-warped Perlin noise: each input coordinate is displaced by its own
    fractal noise field (scaled by `power`) before the source is sampled.
    """
    # Fixed offsets decorrelate the three displacement fields.
    X_OFFSET = Vector3(12414.0 / 65536.0, 65124.0 / 65536.0, 31337.0 / 65536.0)
    Y_OFFSET = Vector3(26519.0 / 65536.0, 18128.0 / 65536.0, 60493.0 / 65536.0)
    Z_OFFSET = Vector3(53820.0 / 65536.0, 11213.0 / 65536.0, 44845.0 / 65536.0)

    def __init__(self, seed: int = 0, frequency: float = 1.0, power: float = 1.0, roughness: int = 3):
        self.source = Perlin(seed)
        self.power = power
        self.x_distort = Fbm(seed, octaves=roughness, frequency=frequency)
        self.y_distort = Fbm(seed + 1, octaves=roughness, frequency=frequency)
        self.z_distort = Fbm(seed + 2, octaves=roughness, frequency=frequency)

    def get(self, p: Vector3) -> float:
        x0, y0, z0 = p + self.X_OFFSET
        x1, y1, z1 = p + self.Y_OFFSET
        x2, y2, z2 = p + self.Z_OFFSET
        x = p.x + self.x_distort.get(x0, y0, z0) * self.power
        y = p.y + self.y_distort.get(x1, y1, z1) * self.power
        z = p.z + self.z_distort.get(x2, y2, z2) * self.power
        return self.source.get(x, y, z)
