"""Mathematical constants at double precision."""

HALF = 5.000000000000000000000000000000000000e-01
THIRD = 3.333333333333333333333333333333333333e-01
TWOTHIRDS = 6.666666666666666666666666666666666666e-01
TWO_THIRDS = 6.666666666666666666666666666666666666e-01
SIXTH = 1.666666666666666666666666666666666666e-01
THREE_QUARTERS = 7.500000000000000000000000000000000000e-01
ROOT_TWO = 1.414213562373095048801688724209698078e00
ROOT_THREE = 1.732050807568877293527446341505872366e00
HALF_ROOT_TWO = 7.071067811865475244008443621048490392e-01
LN_TWO = 6.931471805599453094172321214581765680e-01
LN_LN_TWO = -3.665129205816643270124391582326694694e-01
ROOT_LN_FOUR = 1.177410022515474691011569326459699637e00
ONE_DIV_ROOT_TWO = 7.071067811865475244008443621048490392e-01
PI = 3.141592653589793238462643383279502884e00
HALF_PI = 1.570796326794896619231321691639751442e00
THIRD_PI = 1.047197551196597746154214461093167628e00
SIXTH_PI = 5.235987755982988730771072305465838140e-01
TWO_PI = 6.283185307179586476925286766559005768e00
TWO_THIRDS_PI = 2.094395102393195492308428922186335256e00
THREE_QUARTERS_PI = 2.356194490192344928846982537459627163e00
FOUR_THIRDS_PI = 4.188790204786390984616857844372670512e00
ONE_DIV_TWO_PI = 1.591549430918953357688837633725143620e-01
ONE_DIV_ROOT_TWO_PI = 3.989422804014326779399460599343818684e-01
ROOT_PI = 1.772453850905516027298167483341145182e00
ROOT_HALF_PI = 1.253314137315500251207882642405522626e00
ROOT_TWO_PI = 2.506628274631000502415765284811045253e00
LOG_ROOT_TWO_PI = 9.189385332046727417803297364056176398e-01
ONE_DIV_ROOT_PI = 5.641895835477562869480794515607725858e-01
ROOT_ONE_DIV_PI = 5.641895835477562869480794515607725858e-01
PI_MINUS_THREE = 1.415926535897932384626433832795028841e-01
FOUR_MINUS_PI = 8.584073464102067615373566167204971158e-01
PI_POW_E = 2.245915771836104547342715220454373502e01
PI_SQR = 9.869604401089358618834490999876151135e00
PI_SQR_DIV_SIX = 1.644934066848226436472415166646025189e00
PI_CUBED = 3.100627668029982017547631506710139520e01
CBRT_PI = 1.464591887561523263020142527263790391e00
ONE_DIV_CBRT_PI = 6.827840632552956814670208331581645981e-01
LOG2_E = 1.44269504088896340735992468100189213742664595415298
E = 2.718281828459045235360287471352662497e00
EXP_MINUS_HALF = 6.065306597126334236037995349911804534e-01
EXP_MINUS_ONE = 3.678794411714423215955237701614608674e-01
E_POW_PI = 2.314069263277926900572908636794854738e01
ROOT_E = 1.648721270700128146848650787814163571e00
LOG10_E = 4.342944819032518276511289189166050822e-01
ONE_DIV_LOG10_E = 2.302585092994045684017991454684364207e00
LN_TEN = 2.302585092994045684017991454684364207e00
DEGREE = 1.745329251994329576923690768488612713e-02
RADIAN = 5.729577951308232087679815481410517033e01
SIN_ONE = 8.414709848078965066525023216302989996e-01
COS_ONE = 5.403023058681397174009366074429766037e-01
SINH_ONE = 1.175201193643801456882381850595600815e00
COSH_ONE = 1.543080634815243778477905620757061682e00
PHI = 1.618033988749894848204586834365638117e00
LN_PHI = 4.812118250596034474977589134243684231e-01
ONE_DIV_LN_PHI = 2.078086921235027537601322606117795767e00
EULER = 5.772156649015328606065120900824024310e-01
ONE_DIV_EULER = 1.732454714600633473583025315860829681e00
EULER_SQR = 3.331779238077186743183761363552442266e-01
ZETA_TWO = 1.644934066848226436472415166646025189e00
ZETA_THREE = 1.202056903159594285399738161511449990e00
CATALAN = 9.159655941772190150546035149323841107e-01
GLAISHER = 1.282427129100622636875342568869791727e00
KHINCHIN = 2.685452001065306445309714835481795693e00
EXTREME_VALUE_SKEWNESS = 1.139547099404648657492793019389846112e00
RAYLEIGH_SKEWNESS = 6.311106578189371381918993515442277798e-01
RAYLEIGH_KURTOSIS = 3.245089300687638062848660410619754415e00
RAYLEIGH_KURTOSIS_EXCESS = 2.450893006876380628486604106197544154e-01

TWO_DIV_PI = 6.366197723675813430755350534900574481e-01
ROOT_TWO_DIV_PI = 7.978845608028653558798921198687637369e-01
QUARTER_PI = 0.785398163397448309615660845819875721049292
ONE_DIV_PI = 0.3183098861837906715377675267450287240689192
TWO_DIV_ROOT_PI = 1.12837916709551257389615890312154517168810125

FIRST_FEIGENBAUM = 4.66920160910299067185320382046620161725818557747576863274
PLASTIC = 1.324717957244746025960908854478097340734404056901733364534
GAUSS = 0.834626841674073186281429732799046808993993013490347002449
DOTTIE = 0.739085133215160641655312087673873404013411758900757464965
RECIPROCAL_FIBONACCI = 3.35988566624317755317201130291892717968890513
LAPLACE_LIMIT = 0.662743419349181580974742097109252907056233549115022417