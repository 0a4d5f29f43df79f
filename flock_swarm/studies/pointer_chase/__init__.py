"""
Study: Pointer Chase

A ring of units released toward a moving target.

Questions to explore:
- How quickly does the ring collapse into a flock?
- What shape does the flock take around a resting target?
- What happens when the target crosses the threshold distance?
"""
