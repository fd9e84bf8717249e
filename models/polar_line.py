import math


class PolarLine:
    """
    An infinite line in Hough (polar) form:

        x * cos(theta) + y * sin(theta) = r

    Supports:
      - conversion from raw cv2.HoughLines (rho, theta) output
      - direction-agnostic angle in whole degrees, [0, 180)
      - two far-apart points usable for drawing with cv2.line
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, r, angle_in_degrees):
        self.r = float(r)
        self.angle_in_degrees = int(angle_in_degrees) % 180

    @classmethod
    def from_hough(cls, rho, theta):
        """
        rho, theta: one row of cv2.HoughLines output (theta in radians).

        Angles are rounded to whole degrees; 180 wraps to 0 with r negated
        so the line itself is unchanged.
        """
        degrees = int(round(math.degrees(theta)))
        if degrees >= 180:
            return cls(-rho, degrees - 180)
        return cls(rho, degrees)

    # ------------------------------------------------------------
    # Geometric properties
    # ------------------------------------------------------------
    @property
    def theta(self):
        return math.radians(self.angle_in_degrees)

    def endpoints(self, length):
        """
        Two points on the line, `length` pixels either side of the foot of
        the perpendicular from the origin.
        """
        a = math.cos(self.theta)
        b = math.sin(self.theta)
        x0 = a * self.r
        y0 = b * self.r

        p1 = (int(round(x0 - length * b)), int(round(y0 + length * a)))
        p2 = (int(round(x0 + length * b)), int(round(y0 - length * a)))
        return p1, p2

    def is_near(self, other, radius):
        """True if both r and angle lie within `radius` of the other line."""
        return (
            abs(self.r - other.r) <= radius
            and abs(self.angle_in_degrees - other.angle_in_degrees) <= radius
        )

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return f"PolarLine(r={self.r:.1f}, angle={self.angle_in_degrees})"
