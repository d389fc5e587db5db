"""
Closed value sets for donor records.
"""

BLOOD_TYPES = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')

# Nagpur areas, stored in the `city` column
NAGPUR_AREAS = (
    'Abhyankar Nagar', 'Ajni', 'Ambazari Layout', 'Anant Nagar', 'Anjuman Engineering College Complex',
    'Ashok Nagar', 'Ayodhya Nagar', 'Baba Farid Nagar', 'Bagadganj', 'Bajaj Nagar', 'Bela', 'Bezanbagh',
    'Bhandewadi', 'Borgaon Road', 'Bori (Nagpur)', 'Borkhedi', 'Byramji Town', 'Chaoni', 'Chhaoni', 'Chinchbhuvan',
    'Civil Lines', 'Congress Nagar (Nagpur)', 'Dattawadi', 'Dawlameti', 'Deer Park', 'Dhamna', 'Dhantoli', 'Dharampeth',
    'Dighori Naka', 'Dinshaws', 'Dongargaon', 'Dr. Ambedkar Marg', 'Friends Colony', 'Gaddi Godam', 'Gandhibagh',
    'Gandhinagar', 'Ganjipeth', 'Ganesh Peth Colony', 'Gitti Khadan', 'Giripeth', 'Gokulpeth', 'Gondkhairi',
    'Gorewada Road', 'Hanuman Nagar', 'Hingna', 'Imamwada', 'Indora', 'Itwari', 'Jaitala', 'Jaripatka', 'Jafar Nagar',
    'Kapil Nagar', 'Khamla', 'Khapri', 'Lakadganj', 'Laxmi Nagar', 'Mahal', 'Manewada', 'Manish Nagar', 'Mankapur',
    'Mangalwari', 'Maskasath', 'Mhalgi Nagar', 'Mihan', 'Mominpura', 'Mouda', 'Nandanvan', 'Narendra Nagar', 'Nari',
    'Nayapura', 'Nehru Nagar', 'New Indora', 'Omkar Nagar', 'Pachpaoli', 'Pande Layout', 'Pardi', 'Pawan Bhumi',
    'Pipla', 'Police Line Takli', 'Pratap Nagar', 'Rahiwasi Nagar', 'Rahate Colony', 'Ramdaspeth', 'Ram Nagar',
    'Ravi Nagar', 'Sadar', 'Sakkardara', 'Saraswati Nagar', 'Saroj Nagar', 'Satranjipura', 'Seminary Hills',
    'Shankar Nagar', 'Shraddhanand Peth', 'Sitabuldi', 'Somalwada', 'Subhash Nagar', 'Surendranagar', 'Trimurti Nagar',
    'Untkhana', 'Vayusena Nagar', 'Wardha Road', 'Wardhaman Nagar', 'Wathoda', 'Wanjari Nagar', 'Wathoda Layout',
    'Yashodhara Nagar',
)

BLOOD_TYPE_SET = frozenset(BLOOD_TYPES)
NAGPUR_AREA_SET = frozenset(NAGPUR_AREAS)
